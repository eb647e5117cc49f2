from enum import Enum


class ApprovalStatus(str, Enum):
    """Approval state of captions and generated assets"""
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class ExportJobStatus(str, Enum):
    """Status of an export job"""
    pending = "pending"
    processing = "processing"
    completed = "completed"
    failed = "failed"


class ExportFormat(str, Enum):
    """Output format of an export. Only zip is implemented."""
    zip = "zip"
    json = "json"


TERMINAL_EXPORT_STATUSES = (ExportJobStatus.completed, ExportJobStatus.failed)
