from .gym_env import ENV_COMMANDS, BlobwarsEnv

__all__ = ["BlobwarsEnv", "ENV_COMMANDS"]
