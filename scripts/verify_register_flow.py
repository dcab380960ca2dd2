"""Browser check of the registration flow against a running app.

Start the app first (`streamlit run app.py`), then run this script.
Screenshots land next to it.
"""
import os

from playwright.sync_api import sync_playwright, expect

BASE_URL = os.getenv("AUTHUI_BASE_URL", "http://localhost:8501")
OUT_DIR = os.path.dirname(os.path.abspath(__file__))


def run_verification():
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()
        page.goto(BASE_URL)
        page.wait_for_selector("text='Create account'")

        # 1. Empty submit shows inline errors
        page.get_by_role("button", name="Create account").click()
        page.wait_for_load_state("networkidle")
        expect(page.get_by_text("Email is required")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "01_register_errors.png"))

        # 2. Mismatched passwords
        page.get_by_label("Email", exact=True).fill("a@b.com")
        page.get_by_label("Email", exact=True).press("Enter")
        page.get_by_label("Password", exact=True).fill("longenough")
        page.get_by_label("Password", exact=True).press("Enter")
        page.get_by_label("Confirm password").fill("different1")
        page.get_by_label("Confirm password").press("Enter")
        page.get_by_role("button", name="Create account").click()
        expect(page.get_by_text("Passwords do not match")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "02_register_mismatch.png"))

        # 3. Login link switches screens
        page.get_by_role("button", name="Log in").click()
        expect(page.get_by_text("Welcome back")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "03_login.png"))

        browser.close()


if __name__ == "__main__":
    run_verification()
