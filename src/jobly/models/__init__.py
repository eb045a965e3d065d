from jobly.models.base import Base
from jobly.models.company import Company
from jobly.models.job import Job

__all__ = ["Base", "Company", "Job"]
