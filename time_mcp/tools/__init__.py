from .time_tools import TimeTools, to_call_tool_result

__all__ = ['TimeTools', 'to_call_tool_result']
