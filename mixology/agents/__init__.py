"""
AI prompt components for the Mixology backend.

1. Recipe generation
   - OpenAI chat completion in JSON object mode
   - Prompts in: mixology/agents/cocktail/prompts.py

2. Image generation
   - Ordered strategies: Gemini, GPT-4o + DALL-E hybrid, DALL-E 3
   - Located in: mixology/services/image_service.py

No agent framework is used; each step is a direct SDK call.
"""
