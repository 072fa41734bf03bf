"""Test-runner configuration.

The first Hypothesis run on a fresh checkout builds its unicode charmap
cache, which can trip the ``too_slow`` health check; suppress only that.
"""

from hypothesis import HealthCheck, settings

settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")
