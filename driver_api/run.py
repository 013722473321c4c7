"""
Run the Driver API with uvicorn.
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "driver_api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "false").lower() == "true",
        log_level="info",
    )


if __name__ == "__main__":
    main()
