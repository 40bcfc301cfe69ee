import json


def result(message='OK', status_code=200):
    return {
        'statusCode': status_code,
        'body': json.dumps(message),
    }


def status_code_for(error) -> int:
    """
    Status code for a failed invocation: the error's own, then its cause's,
    then 400.
    """
    for candidate in (error, error.__cause__):
        status_code = getattr(candidate, 'status_code', None)
        if isinstance(status_code, int) and not isinstance(status_code, bool):
            return status_code
    return 400


def error_result(error):
    return result('Error', status_code_for(error))
