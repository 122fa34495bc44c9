from spliminal.ui.app import SpliminalApp

__all__ = ["SpliminalApp"]
