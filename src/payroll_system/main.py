from __future__ import annotations

import getpass
import importlib
import logging
from typing import Callable, Optional

from dotenv import load_dotenv

from config import get_settings_module, missing_required_env

from .container import Container, build_container
from .core.exceptions import DomainError, UnknownEmployeeError
from .logging_setup import configure_logging
from .reports.console import (
    format_employee_details,
    format_employee_table,
    format_period_breakdown,
    format_receipt,
    format_work_log,
)

MENU = """=== MotorPH Payroll System ===
1. Process Payroll
2. View All Employees
3. Search Employee by ID
4. View Work Logs
5. Logout"""


class PayrollConsole:
    """Text menu over the services; input/output are injectable for tests."""

    def __init__(
        self,
        container: Container,
        *,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ):
        self._c = container
        self._input = input_fn
        self._out = output
        self._logger = logger or logging.getLogger(__name__)

    def run(self) -> None:
        actions = {
            1: self.process_payroll,
            2: self.view_employees,
            3: self.search_employee,
            4: self.view_work_logs,
        }
        while True:
            self._out(MENU)
            raw = self._input("Select an option: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                self._logger.warning("Invalid menu input %r", raw)
                self._out("Invalid input. Please enter a number.")
                continue

            if choice == 5:
                self._logger.info("Exiting the system. Goodbye!")
                return

            action = actions.get(choice)
            if action is None:
                self._logger.warning("Invalid option selected by user: %d", choice)
                self._out("Invalid option. Please try again.")
                continue

            try:
                action()
            except (OSError, DomainError) as exc:
                self._logger.error("Menu option %d failed: %s", choice, exc)
                self._out(f"Error reading input data: {exc}")

    def process_payroll(self) -> None:
        run = self._c.payroll_service.run()
        employees = self._c.employee_service.directory()

        for number, results in run.results.items():
            employee = employees[number]
            self._out(f"Employee #{employee.employee_number}: {employee.full_name}")
            self._out("Records:")
            for period, result in zip(run.periods.get(number, []), results):
                breakdown = format_period_breakdown(period)
                if breakdown:
                    self._out(breakdown)
                self._out(format_receipt(result))
            self._out("-----------------------------")

        if run.skipped:
            self._out(f"{len(run.skipped)} row(s) skipped, see the log for details.")

    def view_employees(self) -> None:
        self._out(format_employee_table(self._c.employee_service.list_employees()))

    def search_employee(self) -> None:
        while True:
            number = self._input("\nEnter employee ID to search (or 'exit' to quit): ").strip()
            if number.lower() == "exit":
                return
            try:
                employee = self._c.employee_service.find_employee(number)
            except UnknownEmployeeError:
                self._out(f"No employee found with ID: {number}")
                continue
            self._out(format_employee_details(employee))

    def view_work_logs(self) -> None:
        self._out(format_work_log(self._c.attendance_repo.list_entries()))


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    missing = missing_required_env(settings)
    if missing:
        raise SystemExit(f"Missing required environment variables: {', '.join(missing)}")

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    container = build_container(settings, logger=logger)

    user = container.auth_service.login(input, getpass.getpass)
    if user is None:
        logger.info("Exiting the system. Goodbye!")
        return 1

    logger.info("Payroll System started")
    PayrollConsole(container, logger=logger.getChild("console")).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
