"""Machine-readable error codes reported by the location validators.

Codes are message-catalog keys. Translating them into user-facing text
belongs to the presentation layer.
"""

# Location
GENERAL = "error.general"
NAME_REQUIRED = "error.name"
RETIRE_REASON_REQUIRED = "error.null"
DUPLICATE_NAME = "location.duplicate.name"
PARENT_LOCATION_CYCLE = "Location.parentLocation.error"

# Customizable attributes
ATTRIBUTE_REQUIRED = "error.required"
ATTRIBUTE_MAX_OCCURS = "attribute.error.maxOccurs"
ATTRIBUTE_INVALID = "attribute.error.invalid"

# Field names used when rejecting values
LOCATION_FIELD = "location"
NAME_FIELD = "name"
RETIRE_REASON_FIELD = "retireReason"
PARENT_LOCATION_FIELD = "parentLocation"
ACTIVE_ATTRIBUTES_FIELD = "activeAttributes"
