"""Terminal study planner: tasks in progress, completed and expired, with weekly reports."""

__version__ = "0.1.0"