"""Schema order of the children of an ECHO10 Granule element."""

GRANULE_ELEMENT_ORDER: tuple[str, ...] = (
    "GranuleUR",
    "InsertTime",
    "LastUpdate",
    "DeleteTime",
    "Collection",
    "RestrictionFlag",
    "RestrictionComment",
    "DataGranule",
    "PGEVersionClass",
    "Temporal",
    "Spatial",
    "OrbitCalculatedSpatialDomains",
    "MeasuredParameters",
    "Platforms",
    "Campaigns",
    "AdditionalAttributes",
    "InputGranules",
    "TwoDCoordinateSystem",
    "Price",
    "OnlineAccessURLs",
    "OnlineResources",
    "Orderable",
    "DataFormat",
    "Visible",
    "CloudCover",
    "MetadataStandardName",
    "MetadataStandardVersion",
    "AssociatedBrowseImages",
    "AssociatedBrowseImageUrls",
)


def elements_after(name: str) -> frozenset[str]:
    """Names of Granule children that must follow ``name``."""
    return frozenset(GRANULE_ELEMENT_ORDER[GRANULE_ELEMENT_ORDER.index(name) + 1 :])
