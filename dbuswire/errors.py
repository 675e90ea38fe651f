"""Error codes shared by argument serialization, messages and connections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["ErrorCode", "Error"]


class ErrorCode(IntEnum):
    """Numeric error codes, grouped by range.

    Codes below ``MAX_ARGUMENTS_ERROR`` concern argument assembly and
    disassembly, codes up to ``MAX_MESSAGE_ERROR`` concern messages and
    pending replies, and codes up to ``MAX_CONNECTION_ERROR`` concern
    connections.
    """

    NO_ERROR = 0

    # Arguments errors
    NOT_ATTACHED_TO_ARGUMENTS = 1
    INVALID_SIGNATURE = 2
    REPLACEMENT_DATA_IS_SHORTER = 3
    MALFORMED_MESSAGE_DATA = 4
    READ_WRONG_TYPE = 5
    NOT_PRIMITIVE_TYPE = 6
    INVALID_TYPE = 7
    INVALID_STRING = 8
    INVALID_OBJECT_PATH = 9
    SIGNATURE_TOO_LONG = 10
    EXCESSIVE_NESTING = 11
    CANNOT_END_ARGUMENTS_HERE = 12
    ARGUMENTS_TOO_LONG = 13

    NOT_SINGLE_COMPLETE_TYPE_IN_VARIANT = 14
    EMPTY_VARIANT = 15
    CANNOT_END_VARIANT_HERE = 16

    EMPTY_STRUCT = 17
    CANNOT_END_STRUCT_HERE = 18

    NOT_SINGLE_COMPLETE_TYPE_IN_ARRAY = 19
    TYPE_MISMATCH_IN_SUBSEQUENT_ARRAY_ITERATION = 20
    CANNOT_END_ARRAY_HERE = 21
    CANNOT_END_ARRAY_OR_DICT_HERE = 22
    TOO_FEW_TYPES_IN_ARRAY_OR_DICT = 23
    INVALID_STATE_TO_RESTART_EMPTY_ARRAY = 24
    INVALID_KEY_TYPE_IN_DICT = 25
    GREATER_TWO_TYPES_IN_DICT = 26
    ARRAY_OR_DICT_TOO_LONG = 27
    STATE_NOT_SKIPPABLE = 28

    MISSING_BEGIN_DICT_ENTRY = 1019
    MISPLACED_BEGIN_DICT_ENTRY = 1020
    MISSING_END_DICT_ENTRY = 1021
    MISPLACED_END_DICT_ENTRY = 1022
    MAX_ARGUMENTS_ERROR = 1023

    # Message / pending reply errors
    DETACHED_PENDING_REPLY = 1024
    TIMEOUT = 1025
    MALFORMED_REPLY = 1026

    MESSAGE_TYPE = 1027
    MESSAGE_SENDER = 1028
    MESSAGE_DESTINATION = 1029
    MESSAGE_PATH = 1030
    MESSAGE_INTERFACE = 1031
    MESSAGE_SIGNATURE = 1032
    MESSAGE_METHOD = 1033
    MESSAGE_ERROR_NAME = 1034
    MESSAGE_SERIAL = 1035
    MESSAGE_REPLY_SERIAL = 1036
    MESSAGE_PROTOCOL_VERSION = 1037

    PEER_NO_SUCH_RECEIVER = 1038
    PEER_NO_SUCH_PATH = 1039
    PEER_NO_SUCH_INTERFACE = 1040
    PEER_NO_SUCH_METHOD = 1041

    ARGUMENT_TYPE_MISMATCH = 1042
    PEER_INVALID_PROPERTY = 1043
    PEER_NO_SUCH_PROPERTY = 1044
    ACCESS_DENIED = 1045
    MAX_MESSAGE_ERROR = 2047

    # Connection errors
    AUTHENTICATION_FAILED = 2048
    REMOTE_DISCONNECT = 2049
    LOCAL_DISCONNECT = 2050
    SENDING_TOO_MANY_UNIX_FDS = 2051
    MAX_CONNECTION_ERROR = 3071


@dataclass
class Error:
    """An error state carried along by arguments, messages and replies."""

    code: ErrorCode = ErrorCode.NO_ERROR

    def __post_init__(self) -> None:
        self.code = ErrorCode(self.code)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "code":
            value = ErrorCode(value)
        super().__setattr__(name, value)

    @property
    def is_error(self) -> bool:
        """True unless the code is ``NO_ERROR``."""
        return self.code != ErrorCode.NO_ERROR

    def message(self) -> str:
        """Return the text describing this error; no texts are defined, so it is empty."""
        return ""