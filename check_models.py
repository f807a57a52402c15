import google.generativeai as genai

from quizcraft.core.config import load_settings


settings = load_settings()
genai.configure(api_key=settings.GOOGLE_API_KEY)

print("🔍 Connecting to Google...")

try:
    for m in genai.list_models():
        if 'generateContent' in m.supported_generation_methods:
            marker = "←" if m.name.endswith(settings.GEMINI_MODEL) else ""
            print(f"✅ {m.name} {marker}")
except Exception as e:
    print(f"❌ Error: {e}")
