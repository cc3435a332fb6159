from .time_info import TimeInfo

__all__ = ['TimeInfo']
