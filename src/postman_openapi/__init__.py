"""Convert Postman collections into OpenAPI 3.0 documents."""

from postman_openapi.config import ConvertOptions
from postman_openapi.generator.document import ConversionResult, convert, convert_collection
from postman_openapi.parser.postman import load_collection

__all__ = ["ConversionResult", "ConvertOptions", "convert", "convert_collection", "load_collection"]
