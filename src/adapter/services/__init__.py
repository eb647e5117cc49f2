from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["LocalFileStorage", "SqlAlchemyUnitOfWork"]
