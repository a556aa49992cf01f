import json
import re

from django.http import JsonResponse

from hackhub.libs.errors import ValidationFailed

CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(key):
    return CAMEL_BOUNDARY.sub("_", key).lower()


def parse_json_body(request):
    """Decodes a JSON object body, accepting camelCase or snake_case keys"""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (TypeError, ValueError):
        raise ValidationFailed("Invalid JSON body")
    if not isinstance(data, dict):
        raise ValidationFailed("Invalid JSON body")
    return {to_snake(key): value for key, value in data.items()}


def validated(form):
    if not form.is_valid():
        raise ValidationFailed("Validation failed",
                               errors=form.errors.get_json_data())
    return form.cleaned_data


def provided(cleaned_data, data):
    """Restricts cleaned form data to the keys the caller actually sent"""
    return {key: value for key, value in cleaned_data.items() if key in data}


def success(**extra):
    return JsonResponse(dict(success=True, **extra))


def json_error(message, status, errors=None):
    body = {"error": message}
    if errors:
        body["errors"] = errors
    return JsonResponse(body, status=status)


def query_flag(request, name):
    return request.GET.get(name, "").lower() in ("1", "true", "yes")
