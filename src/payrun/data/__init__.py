"""Pay run data sources and fixtures."""

from payrun.data.fixtures import (
    fixture_employees,
    fixture_payroll_entries,
    random_disposition,
)
from payrun.data.sources import (
    DuplicateEmployeeError,
    InMemoryDataSource,
    PayrollDataSource,
    SqlDataSource,
    open_data_source,
)

__all__ = [
    "DuplicateEmployeeError",
    "InMemoryDataSource",
    "PayrollDataSource",
    "SqlDataSource",
    "open_data_source",
    "fixture_employees",
    "fixture_payroll_entries",
    "random_disposition",
]
