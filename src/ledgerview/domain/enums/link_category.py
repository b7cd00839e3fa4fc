from enum import Enum


class LinkCategory(str, Enum):
    TRANSACTIONS = "transactions"
    ADDRESSES = "addresses"
    OBJECTS = "objects"
