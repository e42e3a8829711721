"""
Timing module

Named timers for measuring elapsed time around synchronous and
asynchronous work.
"""

from egon_log.timing.timer_mixin import TimerMixin

__all__ = ["TimerMixin"]
