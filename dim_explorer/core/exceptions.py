class DimExplorerError(Exception):
    """Base exception for all dim_explorer errors"""
    pass

class ConfigError(DimExplorerError):
    """Invalid or inconsistent global.json"""
    pass

class DataLoadError(DimExplorerError):
    """
    The node/dimension document could not be read:
    missing file, invalid JSON, wrong top-level type
    """
    pass

class FilterKindError(DimExplorerError, ValueError):
    """A filter variant was applied to a dimension of a different kind"""
    pass

class DimensionNotFoundError(DimExplorerError, LookupError):
    """A selected dimension id has no matching Dimension in the catalog"""

    def __init__(self, dimension_id: str):
        self.dimension_id = dimension_id
        super().__init__(f"Dimension '{dimension_id}' is not available.")
