#!/usr/bin/env python3
"""
Cocktail Recommendation Smoke Script

Runs the full recommendation pipeline locally against the real providers,
without starting the API server.

Usage:
    python scripts/try_cocktails.py
    python scripts/try_cocktails.py --ingredients "gin, tonic, cucumber" --alcohol gin
    python scripts/try_cocktails.py --required rum --characteristics refreshing sweet
    python scripts/try_cocktails.py --strategies DALL-E-3 --timeout 30

Requires OPENAI_API_KEY (and GEMINI_API_KEY for the Gemini strategy).
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from mixology.auth.dependencies import resolve_credentials
from mixology.schemas.cocktails import CocktailRecommendationRequest, CocktailResponse
from mixology.services.errors import RecommendationError
from mixology.services.image_service import resolve_strategies
from mixology.services.recommendation_service import (
    build_recommendation_config,
    recommend_cocktails,
)


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_cocktails(cocktails: List[CocktailResponse]) -> None:
    """Pretty print the pipeline result."""
    print("\n" + "=" * 60)
    print(f"COCKTAILS: {len(cocktails)}")
    print("=" * 60)

    if not cocktails:
        print("\n❌ No cocktails matched these preferences\n")
        return

    for i, cocktail in enumerate(cocktails, 1):
        image = cocktail.image_url
        if image.startswith("data:"):
            image = image[:40] + "..."
        print(f"--- Cocktail #{i} ---")
        print(f"  Name:       {cocktail.name}")
        print(f"  Image:      {image}")
        print(f"  Method:     {cocktail.image_method}")
        print(f"  Serving:    {cocktail.serving_style}")
        print(f"  Prep time:  {cocktail.prep_time or '-'}")
        print(f"  Tags:       {', '.join(cocktail.characteristics)}")
        print(f"  Ingredients:")
        for ingredient in cocktail.ingredients:
            print(f"    - {ingredient}")
        print()


async def run(
    ingredients: str,
    required: List[str],
    alcohol: str,
    characteristics: List[str],
    model: Optional[str] = None,
    strategies: Optional[List[str]] = None,
    timeout: Optional[float] = None,
) -> int:
    try:
        credentials = resolve_credentials(model=model)
    except ValueError:
        print("\n⚠️  ERROR: OPENAI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export OPENAI_API_KEY=sk-...")
        return 1

    config = build_recommendation_config()
    if strategies:
        config.strategies = resolve_strategies(strategies)
    if timeout:
        config.timeout_seconds = timeout

    request = CocktailRecommendationRequest(
        ingredients=ingredients,
        required_ingredients=required,
        alcohol=alcohol,
        characteristics=characteristics,
    )

    print("\n" + "=" * 60)
    print("COCKTAIL RECOMMENDATION PIPELINE")
    print("=" * 60)
    print(f"\nIngredients:     {ingredients}")
    print(f"Required:        {', '.join(required) or '-'}")
    print(f"Alcohol:         {alcohol}")
    print(f"Characteristics: {', '.join(characteristics) or '-'}")
    print(f"Strategies:      {', '.join(s.name for s in config.strategies)}")

    try:
        cocktails = await recommend_cocktails(request, credentials, config)
    except RecommendationError as e:
        print(f"\n❌ {type(e).__name__}: {e.message}\n")
        return 1

    print_cocktails(cocktails)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the cocktail recommendation pipeline")
    parser.add_argument("--ingredients", default="rum, mint, lime, sugar, soda")
    parser.add_argument("--required", nargs="*", default=[])
    parser.add_argument("--alcohol", default="any")
    parser.add_argument("--characteristics", nargs="*", default=[])
    parser.add_argument("--model", default=None, help="Chat model (default: OPENAI_MODEL)")
    parser.add_argument("--strategies", nargs="*", default=None, help="Image strategy order")
    parser.add_argument("--timeout", type=float, default=None, help="Image budget in seconds")
    args = parser.parse_args()

    return asyncio.run(run(
        ingredients=args.ingredients,
        required=args.required,
        alcohol=args.alcohol,
        characteristics=args.characteristics,
        model=args.model,
        strategies=args.strategies,
        timeout=args.timeout,
    ))


if __name__ == "__main__":
    sys.exit(main())
