"""Export Worker

In-process pool that builds export archives in the background. Jobs are
submitted by id; the job record in the store stays the source of truth for
status, so a restart loses nothing but the queue order.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, Set
from sqlalchemy.orm import sessionmaker
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.archive_builder import ArchiveBuilder, ExportOptions
from src.app.services.export_queue import ExportJobQueue, ExportQueueFullError
from src.app.services.file_storage import FileStorage
from src.app.use_cases.exports import ProcessExportJobUseCase

logger = logging.getLogger(__name__)

JobProcessor = Callable[[str], Awaitable[Any]]


class ExportWorker(ExportJobQueue):
    """
    Bounded queue of export job ids consumed by a fixed number of tasks

    submit() never waits: a full queue raises ExportQueueFullError so the
    caller can record the rejection. Errors raised while processing a job
    are logged and never reach the submitter.
    """

    def __init__(
        self,
        process_job: JobProcessor,
        concurrency: int = 2,
        max_queue_size: int = 100,
    ):
        """
        Initialize ExportWorker.

        Args:
            process_job: Coroutine function processing one job id
            concurrency: Number of jobs processed at the same time
            max_queue_size: Jobs that may wait before submit() is rejected
        """
        self.process_job = process_job
        self.concurrency = max(1, concurrency)
        self.max_queue_size = max_queue_size
        self.running = False
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_queue_size)
        self._consumers: List[asyncio.Task] = []
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def queued(self) -> int:
        return self._queue.qsize()

    def submit(self, job_id: str) -> None:
        try:
            self._queue.put_nowait(job_id)
        except asyncio.QueueFull:
            raise ExportQueueFullError(job_id, self.max_queue_size) from None
        logger.info(f"[ExportWorker] Queued export job {job_id} ({self._queue.qsize()} waiting)")

    async def start(self) -> None:
        """Start the consumer tasks"""
        if self.running:
            return
        self.running = True
        self._consumers = [
            asyncio.create_task(self._consume(index), name=f"export-worker-{index}")
            for index in range(self.concurrency)
        ]
        logger.info(f"[ExportWorker] Started with {self.concurrency} consumers")

    async def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop consuming and wait for in-flight jobs

        Jobs still waiting in the queue remain pending in the store and are
        picked up again on the next start.

        Args:
            timeout: Seconds to wait for in-flight jobs, None waits for all
        """
        self.running = False
        for consumer in self._consumers:
            consumer.cancel()
        await asyncio.gather(*self._consumers, return_exceptions=True)
        self._consumers = []

        if self._in_flight:
            logger.info(f"[ExportWorker] Waiting for {len(self._in_flight)} in-flight exports")
            await asyncio.wait(set(self._in_flight), timeout=timeout)
        logger.info("[ExportWorker] Stopped")

    async def join(self) -> None:
        """Wait until every submitted job has been processed"""
        await self._queue.join()

    async def _consume(self, index: int) -> None:
        while True:
            job_id = await self._queue.get()
            task = asyncio.create_task(self._process_safely(job_id))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)
            try:
                # Cancelling the consumer must not cancel a running build
                await asyncio.shield(task)
            finally:
                self._queue.task_done()

    async def _process_safely(self, job_id: str) -> None:
        try:
            await self.process_job(job_id)
        except Exception as e:
            logger.exception(f"[ExportWorker] Background export processing failed for job {job_id}: {e}")


def create_export_job_processor(
    session_factory: sessionmaker,
    file_storage: FileStorage,
    asset_root: str,
    options: Optional[ExportOptions] = None,
) -> JobProcessor:
    """
    Build the coroutine that processes one export job in its own session

    Args:
        session_factory: Async session factory
        file_storage: Storage for the export output directory
        asset_root: Directory that asset and image urls resolve against
        options: Archive contents for queued jobs
    """

    async def process(job_id: str):
        async with session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)
            use_case = ProcessExportJobUseCase(
                uow=uow,
                archive_builder=ArchiveBuilder(uow, file_storage, asset_root),
                options=options,
            )
            result = await use_case.execute(job_id)

        if result.is_err():
            logger.warning(f"[ExportWorker] Job {job_id} finished with {result.error.code}: {result.error.message}")
        return result

    return process
