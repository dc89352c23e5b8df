from .jsa import fetch_month, result_url

__all__ = [
    "fetch_month",
    "result_url",
]
