"""Export Job Queue Interface

Submission channel between the export orchestrator and the worker pool.
"""
from abc import ABC, abstractmethod


class ExportQueueFullError(Exception):
    """Raised when the export queue cannot accept more jobs"""

    def __init__(self, job_id: str, capacity: int):
        self.job_id = job_id
        self.capacity = capacity
        super().__init__(f"Export queue is full (capacity {capacity}), job {job_id} not queued")


class ExportJobQueue(ABC):
    """Interface for submitting export jobs for background processing"""

    @abstractmethod
    def submit(self, job_id: str) -> None:
        """
        Queue a job for processing without waiting for it

        Raises:
            ExportQueueFullError: if the queue is at capacity
        """
        pass
