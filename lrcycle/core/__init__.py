"""
Core domain logic - no ML framework dependencies.

Schedules are pure functions of the step index plus a step counter, so
everything here can be tested without torch.
"""

__version__ = "0.1.0"
