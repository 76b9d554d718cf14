import subprocess
import sys
import time
import logging

# Setup basic logging for run.py
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def run():
    logger.info("Starting Kitchen Scaler...")

    # 1. Start Backend
    logger.info("Starting Backend API (Uvicorn)...")
    backend = subprocess.Popen(
        ["uvicorn", "kitchen_scaler.main:app", "--reload", "--port", "8000"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    # Give the API a moment before the UI starts calling it
    time.sleep(2)

    # 2. Start Frontend
    logger.info("Starting Frontend UI (Streamlit)...")
    frontend = subprocess.Popen(
        ["streamlit", "run", "kitchen_scaler/frontend.py", "--server.port", "8501"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    logger.info("UI:  http://localhost:8501")
    logger.info("API: http://localhost:8000/docs")
    logger.info("Press Ctrl+C to stop everything.")

    try:
        backend.wait()
        frontend.wait()
    except KeyboardInterrupt:
        logger.info("Stopping...")
        backend.terminate()
        frontend.terminate()
        logger.info("Done.")


if __name__ == "__main__":
    run()
