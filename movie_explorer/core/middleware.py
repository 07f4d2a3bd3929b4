"""
HTTP Middleware

Response shaping that has to happen outside CORSMiddleware.
"""

from fastapi import Request, Response

# Body-specific headers dropped when the body is emptied
_BODY_HEADERS = ("content-length", "content-type")


async def empty_preflight_body(request: Request, call_next):
    """
    CORSMiddleware answers preflights with a plain "OK" body.
    OPTIONS is answered with 200 and no body, whoever handled it.
    """
    response = await call_next(request)
    if request.method != "OPTIONS" or response.status_code != 200:
        return response

    async for _ in response.body_iterator:
        pass
    headers = {k: v for k, v in response.headers.items() if k not in _BODY_HEADERS}
    return Response(status_code=200, headers=headers)
