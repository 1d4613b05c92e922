"""vapisim -- Appliance management API access simulator.

This package simulates the appliance access toggles (console CLI, DCUI,
SSH and shell) of a virtualization appliance's management API. It is
meant to stand in for a real appliance in tests: the toggles live in
memory and are served over HTTP by a small FastAPI host service.
"""

__version__ = "0.1.0"
