class WorldDataError(ValueError):
    """The world data file is malformed or internally inconsistent."""
