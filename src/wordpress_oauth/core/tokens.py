"""Token endpoint URL and request body."""

GRANT_TYPE = "authorization_code"


def token_url(host: str) -> str:
    return f"{host}/token"


def base_token_fields(
    code: str, *, client_id: str, client_secret: str, redirect_uri: str,
) -> dict[str, str]:
    """Standard OAuth 2.0 token request fields, without a grant type."""
    return {
        "client_id": client_id,
        "client_secret": client_secret,
        "code": code,
        "redirect_uri": redirect_uri,
    }


def token_fields(
    code: str, *, client_id: str, client_secret: str, redirect_uri: str,
) -> dict[str, str]:
    """Token request body for the authorization code grant.

    ``grant_type`` is fixed to ``authorization_code``; refresh and other
    grants are not exchanged here.
    """
    return {
        **base_token_fields(
            code, client_id=client_id, client_secret=client_secret, redirect_uri=redirect_uri,
        ),
        "grant_type": GRANT_TYPE,
    }
