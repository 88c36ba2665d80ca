from .save_location_use_case import SaveLocationUseCase

__all__ = ["SaveLocationUseCase"]
