import json

import requests
import fitz  # PyMuPDF

BASE_URL = "http://localhost:3001"


def create_dummy_pdf(filename="smoke.pdf"):
    doc = fitz.open()
    page = doc.new_page()
    text = """
    Photosynthesis is the process used by plants, algae and certain bacteria to harness energy from sunlight and turn it into chemical energy.

    There are two types of photosynthetic processes: oxygenic photosynthesis and anoxygenic photosynthesis.
    The general equation for photosynthesis is:
    6CO2 + 6H2O + Light Energy -> C6H12O6 + 6O2

    This process takes place in the chloroplasts, specifically using chlorophyll.
    """
    page.insert_text((50, 50), text)
    doc.save(filename)
    print(f"Created {filename}")


def smoke_health():
    try:
        r = requests.get(f"{BASE_URL}/")
        print("Health Check:", r.status_code, r.json())
    except Exception as e:
        print("Health Check Failed:", e)


def smoke_generate():
    create_dummy_pdf()
    form = {"numMCQ": "2", "numTF": "1", "difficulty": "Easy"}
    try:
        print("Sending request...")
        with open("smoke.pdf", "rb") as fh:
            r = requests.post(
                f"{BASE_URL}/api/generate",
                data=form,
                files={"sourceFile": ("smoke.pdf", fh, "application/pdf")},
                timeout=120,
            )
        print("Status:", r.status_code)
        if r.status_code != 200:
            print("Error:", r.text)
            return None
        quiz = r.json()
        print("Questions:", len(quiz["questions"]))
        return quiz
    except Exception as e:
        print("Generate Failed:", e)
        return None


def smoke_export(quiz):
    r = requests.post(f"{BASE_URL}/api/export/txt", data=json.dumps(quiz),
                      headers={"Content-Type": "application/json"})
    print("Export:", r.status_code, r.headers.get("content-disposition"))
    print(r.text)


if __name__ == "__main__":
    smoke_health()
    quiz = smoke_generate()
    if quiz:
        smoke_export(quiz)
