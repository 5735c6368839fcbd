from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ResponseCategory(str, Enum):
    GREETINGS = "greetings"
    QUESTIONS = "questions"
    CODING = "coding"
    CREATIVE = "creative"
    GENERAL = "general"


CANNED_RESPONSES: Mapping[ResponseCategory, tuple[str, ...]] = MappingProxyType(
    {
        ResponseCategory.GREETINGS: (
            "Hello! I'm Gemini AI, your intelligent assistant. How can I help you today? 😊",
            "Hi there! Ready to explore ideas and answer your questions.",
            "Welcome! I'm here to help. Let's begin!",
        ),
        ResponseCategory.QUESTIONS: (
            "That's a great question. Let me explain clearly...",
            "Nice question — here's the breakdown...",
            "Good thinking. Here's what you should know...",
        ),
        ResponseCategory.CODING: (
            "Let's look at a clean coding solution...",
            "Here’s a clear and efficient approach...",
            "I'll explain this step by step...",
        ),
        ResponseCategory.CREATIVE: (
            "Love this idea! Here's something creative...",
            "Let's get imaginative...",
            "Here's a creative take on that...",
        ),
        ResponseCategory.GENERAL: (
            "Here’s a clear explanation...",
            "Let me explain that simply...",
            "Here’s what you need to know...",
        ),
    }
)

SUGGESTION_POOL: tuple[str, ...] = (
    "Explain quantum computing like I'm 10",
    "How do neural networks learn?",
    "Write a short poem about AI",
    "Explain relativity simply",
)
