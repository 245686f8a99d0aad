"""Random word selection from line-delimited word lists."""

from wordsampler.sampler import (
    InvalidRequestError,
    SampleRequest,
    SampleResult,
    SourceDiagnostic,
    WordSampler,
    get_words,
)

__all__ = [
    "InvalidRequestError",
    "SampleRequest",
    "SampleResult",
    "SourceDiagnostic",
    "WordSampler",
    "get_words",
]
