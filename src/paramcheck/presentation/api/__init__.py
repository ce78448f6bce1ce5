"""Public API: preconfigured entry points."""

from paramcheck.presentation.api.entry import ParamCheck, SafeParamCheck

__all__ = ["ParamCheck", "SafeParamCheck"]
