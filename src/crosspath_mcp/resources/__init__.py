from .platform_info import platform_info

__all__ = ["platform_info"]
