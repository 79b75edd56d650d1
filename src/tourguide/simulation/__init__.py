from .providers import SimulatedGpsProvider, SimulatedRewardCentral
from .users import generate_internal_users

__all__ = ["SimulatedGpsProvider", "SimulatedRewardCentral", "generate_internal_users"]
