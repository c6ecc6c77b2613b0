from .ctgov_client import FALLBACK_TRIALS, RegistryError, find_trials, map_study
