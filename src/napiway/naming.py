"""Name synthesis for generated types, requests and clients."""


def exported_name(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    >>> exported_name("userId")
    'UserId'
    """
    if not name:
        return name
    return name[:1].upper() + name[1:]


def client_name(api_name: str) -> str:
    """Derive the SDK client class name from the API name ("Testing API" -> "TestingAPI")."""
    return exported_name(api_name.replace(" ", ""))


def request_name(endpoint_name: str) -> str:
    return exported_name(endpoint_name) + "Request"


def response_name(endpoint_name: str, status: int) -> str:
    return f"{exported_name(endpoint_name)}{status}Response"
