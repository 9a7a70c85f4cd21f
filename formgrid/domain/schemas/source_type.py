from enum import Enum


class Source_type(str, Enum):
    PDF = "pdf"
    PDF2JSON = "pdf2json"
