from flask import request
from flask_api import status


def custom_response(msg, code=status.HTTP_200_OK):
    return {
        'code': code,
        'message': msg
    }, code


def request_payload():
    """
    Returns the request body as a dict. JSON bodies are preferred; url-encoded form
    posts are accepted as well. Anything else yields an empty dict.
    """
    req_data = request.get_json(silent=True)
    if isinstance(req_data, dict):
        return req_data
    if request.form:
        return request.form.to_dict()
    return {}
