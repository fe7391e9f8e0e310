"""Tool lists, tool set-up sheets and table layout for CNC machining projects."""

__version__ = "0.1.0"
__all__ = ["tool", "toollist", "toolsheet_model", "toolsheet", "tableprinter"]