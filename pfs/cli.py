import logging

from pfs.config import Config


def main():
    """Entry point for api command for production use case."""
    import uvicorn

    logging.basicConfig(
        level=Config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("pfs.api.app:app", host=Config.get_host(), port=Config.get_port())


def dev():
    import subprocess

    subprocess.run(
        [
            "fastapi",
            "run",
            "--host",
            "localhost",
            "--port",
            str(Config.get_port()),
            "pfs/api/app.py",
            "--reload",
        ]
    )


if __name__ == "__main__":
    main()
