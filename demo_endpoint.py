"""
Quick demo script to run the cocktail recommendation API locally.

This script starts a local server and shows how to make requests to the endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Mixology Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Ping:          GET  http://localhost:8000/api/ping")
    print("   - Cocktails:     POST http://localhost:8000/api/cocktails/recommendations")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("🔑 Credentials:")
    print("   Send X-OpenAI-API-Key (and optionally X-OpenAI-Model),")
    print("   or set OPENAI_API_KEY in your .env file.")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/cocktails/recommendations" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -H "X-OpenAI-API-Key: sk-..." \\')
    print('     -d \'{"ingredients": "rum, mint, lime, sugar, soda", '
          '"requiredIngredients": ["rum"], "alcohol": "rum", '
          '"characteristics": ["refreshing", "sweet"]}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "mixology.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
