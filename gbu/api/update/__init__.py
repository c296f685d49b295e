"""Update API domain: file-level link update commands."""

from .cmd_opendap import cmd_opendap
from .cmd_s3 import cmd_s3
from .GranuleFormat import GranuleFormat
from .UpdateOutput import UpdateOutput

__all__ = ["GranuleFormat", "UpdateOutput", "cmd_opendap", "cmd_s3"]
