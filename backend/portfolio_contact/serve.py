# portfolio_contact/serve.py
import uvicorn

from portfolio_contact.core.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run("portfolio_contact.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
