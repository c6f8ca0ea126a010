import uvicorn
from expense_tracker.config import get_settings
from expense_tracker.main import create_app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
