import os
import signal
import sys

# Add project root to sys.path
sys.path.append(os.getcwd())

from sqlalchemy.orm import Session

from loaders.logging_config import setup_logging
from models import get_engine, create_schema
from services import ContentImportJob, ContentRepository, TypeRepository


def run_import(source_path=None):
    setup_logging()
    engine = get_engine()
    create_schema(engine)

    with Session(engine) as session:
        content = ContentRepository(session)
        content.ensure_root()
        job = ContentImportJob(TypeRepository(session), content, source_path=source_path)

        # Ctrl+C finishes the current row, then stops
        signal.signal(signal.SIGINT, lambda signum, frame: job.stop())

        summary = job.execute()

    print(summary)
    return summary


if __name__ == "__main__":
    run_import(sys.argv[1] if len(sys.argv) > 1 else None)
