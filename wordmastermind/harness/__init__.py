from .core import play_session, play_round, simulate_rounds
from .io import write_csv, write_manifest

__all__ = ["play_session", "play_round", "simulate_rounds", "write_csv", "write_manifest"]
