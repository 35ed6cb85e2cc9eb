"""
Prompt templates for the LLM classifier and advisor.

The category and feature lists are rendered from the catalog at call
time so the prompt can never drift from the ids the validator accepts.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from infra_estimator.benchmarks.catalog import BenchmarkCatalog
from infra_estimator.schemas.estimate import AppBenchmark

CLASSIFIER_SYSTEM_PROMPT = """You are an expert in software architecture and system sizing.

Your job is to read a product description and classify it so that its
infrastructure can be estimated.

RULES:
1. "category" MUST be one of the category ids provided. Never invent one.
2. Feature lists MUST only contain feature ids provided.
3. "detected_features" = explicitly mentioned or clearly required.
4. "suggested_features" = not mentioned but very likely needed.
5. Be honest with "confidence": 0.9+ only for unambiguous descriptions."""


ADVISOR_SYSTEM_PROMPT = """You are an expert in software architecture and scaling systems.

Given a product, its category and expected monthly active users, give
practical, specific advice. Keep every item to one sentence.

OUTPUT:
- insights: 3-5 observations about the sizing
- risks: 2-3 technical risks to consider
- recommendations: 3-5 architecture recommendations
- scaling_considerations: 2-3 points about future scaling"""


def format_classifier_prompt(
    description: str,
    catalog: BenchmarkCatalog,
    reference_apps: Sequence[str] | None = None,
) -> str:
    """Build the user message for classification."""
    categories = [
        {
            "id": b.category,
            "name": b.name,
            "description": b.description,
            "examples": list(b.real_world_examples),
        }
        for b in catalog.list_benchmarks()
    ]
    features = [
        {"id": f.id, "name": f.name, "description": f.description}
        for f in catalog.list_features()
    ]

    lines = [
        "PROJECT DESCRIPTION:",
        f'"{description}"',
    ]
    if reference_apps:
        lines.append(f"\nREFERENCE APPS: {', '.join(reference_apps)}")
    lines += [
        "\nAVAILABLE CATEGORIES:",
        json.dumps(categories, indent=2),
        "\nAVAILABLE FEATURES:",
        json.dumps(features, indent=2),
    ]
    return "\n".join(lines)


def format_advisor_prompt(
    description: str,
    benchmark: AppBenchmark | None,
    category: str,
    estimated_mau: int,
) -> str:
    """Build the user message for insights."""
    label = f"{category} ({benchmark.name})" if benchmark else category
    return (
        f'PROJECT:\n"{description}"\n\n'
        f"DETECTED TYPE: {label}\n"
        f"ESTIMATED USERS (MAU): {estimated_mau:,}\n\n"
        "Based on this, provide practical insights."
    )
