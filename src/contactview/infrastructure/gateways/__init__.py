from .json_gateway import JsonFileContactGateway
from .memory_gateway import InMemoryContactGateway, InMemoryInquiryGateway, StaticGreetingGateway

__all__ = [
    "InMemoryContactGateway",
    "InMemoryInquiryGateway",
    "JsonFileContactGateway",
    "StaticGreetingGateway",
]
