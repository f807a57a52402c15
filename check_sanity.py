print("Checking imports...")
try:
    import fitz
    print("PyMuPDF: OK")
except ImportError as e:
    print(f"PyMuPDF Error: {e}")

try:
    import google.generativeai
    print("Gemini: OK")
except ImportError as e:
    print(f"Gemini Error: {e}")

try:
    from quizcraft.main import create_app
    create_app()
    print("App Factory: OK")
except Exception as e:
    print(f"App Factory Error: {e}")

print("Done.")
