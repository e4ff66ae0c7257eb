from .base import UseCase, UseCaseRequest, UseCaseResponse
from .fetch_greeting import FetchGreetingRequest, FetchGreetingResponse, FetchGreetingUseCase
from .submit_inquiry import SubmitInquiryRequest, SubmitInquiryResponse, SubmitInquiryUseCase

__all__ = [
    "FetchGreetingRequest",
    "FetchGreetingResponse",
    "FetchGreetingUseCase",
    "SubmitInquiryRequest",
    "SubmitInquiryResponse",
    "SubmitInquiryUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
