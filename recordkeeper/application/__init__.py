"""Demo applications.

Each demo seeds its own collections and narrates a fixed script through an
OutputSink.  Import the run_* functions from here.
"""

from .finance import FinanceApp, run_finance_demo
from .grading import GradingApp, run_grading_demo
from .healthcare import HealthcareApp, run_healthcare_demo
from .inventory import InventoryApp, run_inventory_demo
from .output import OutputSink
from .warehouse import WarehouseManager, run_warehouse_demo

__all__ = [
    "OutputSink",
    "InventoryApp",
    "WarehouseManager",
    "HealthcareApp",
    "GradingApp",
    "FinanceApp",
    "run_inventory_demo",
    "run_warehouse_demo",
    "run_healthcare_demo",
    "run_grading_demo",
    "run_finance_demo",
]
