"""Launch the rail network pipeline FastAPI server."""

import uvicorn

from railnet_pipeline.logging_config import setup_logging


def main():
    setup_logging()
    uvicorn.run("railnet_pipeline.server:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
