"""Backend entrypoint: starts uvicorn on the port given by BACKEND_PORT."""
import os
import uvicorn

# Import the app object directly so frozen bundles do not rely on uvicorn's string import.
from tradejournal.main import app


def main() -> None:
    port = int(os.environ.get("BACKEND_PORT", "8001"))
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
