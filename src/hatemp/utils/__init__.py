from .url_utils import build_auth_headers, build_rest_url

__all__ = ["build_auth_headers", "build_rest_url"]
