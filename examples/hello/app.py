"""Hello World — the simplest waymark router.

Demonstrates routes, path parameters, return-value negotiation, and a
custom not-found handler.

Run:
    python app.py
"""

from waymark import Request, Response, Router

router = Router()


@router.get("/")
def index(request: Request) -> str:
    return "Hello, World!"


@router.get("/greet/{name}")
def greet(request: Request) -> str:
    return f"Hello, {request.path_params['name']}!"


@router.get("/status")
def status(request: Request) -> dict[str, str]:
    return {"status": "ok"}


@router.set_not_found
def not_found(request: Request) -> Response:
    return Response(f"Nothing at {request.path}", status=404)


if __name__ == "__main__":
    router.run()
