"""
The content import job: workbook in, content tree out, one status line back.

A host (the run_import script, a scheduler, a test) creates the job, calls
execute() once and shows the returned summary. stop() may be called from
another thread or a signal handler; it is honoured between rows, never in the
middle of one, so every node that was started is also saved.
"""

import threading

import structlog

from loaders import config
from loaders.excel_loader import source_available, read_rows
from loaders.row_decoder import decode_rows
from loaders.tree_builder import TreeBuilder

from .content_materializer import ContentMaterializer

log = structlog.get_logger(__name__)


class ContentImportJob:
    display_name = 'Content Tree Import'

    def __init__(self, type_repository, content_repository, source_path=None, parent_id=None):
        self.type_repository = type_repository
        self.content_repository = content_repository
        self.source_path = source_path if source_path is not None else config.source_file_path()
        self.parent_id = parent_id if parent_id is not None else config.parent_content_id()
        self._stop_signaled = threading.Event()

    @property
    def stop_requested(self):
        return self._stop_signaled.is_set()

    def stop(self):
        """Ask a running import to finish after the row it is working on."""
        self._stop_signaled.set()

    def execute(self):
        """
        Run the import.

        Returns:
            str: 'No file found to process', 'Stop of job was called' or
                 '<N> items imported.'
        """
        if not source_available(self.source_path):
            log.info('import_skipped', path=str(self.source_path), reason='no file')
            return config.NO_FILE_MESSAGE

        log.info('import_started', path=str(self.source_path), parent=self.parent_id)
        try:
            records = decode_rows(read_rows(self.source_path))

            builder = TreeBuilder(self.parent_id, self.content_repository.parent_of)
            materializer = ContentMaterializer(self.type_repository, self.content_repository)

            cursor = builder.initial_cursor()
            content_count = 0
            for record in records:
                if self.stop_requested:
                    log.info('import_stopped', imported=content_count, remaining=len(records) - content_count)
                    return config.STOPPED_MESSAGE

                placed = builder.place(record, cursor)
                content_id = materializer.materialize(placed)
                cursor = builder.advance(placed, content_id)
                content_count += 1
        except Exception:
            log.exception('import_failed', path=str(self.source_path))
            raise

        # A stop that lands during the last row still wins over the count
        if self.stop_requested:
            log.info('import_stopped', imported=content_count, remaining=0)
            return config.STOPPED_MESSAGE

        summary = config.IMPORTED_MESSAGE.format(count=content_count)
        log.info('import_finished', imported=content_count, summary=summary)
        return summary
