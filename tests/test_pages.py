"""Tests for the server-rendered calculator screens."""

from llm.summarizer import FAILURE_MESSAGE, MISSING_KEY_MESSAGE
from models.screen import MENU_ITEMS, Screen
from services.policy_service import INVERTED_RANGE_MESSAGE, MISSING_DATES_MESSAGE


def test_main_menu_lists_every_calculator(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert 'data-screen="menu"' in resp.text
    for item in MENU_ITEMS:
        assert f'href="{item.path}"' in resp.text


def test_menu_covers_every_calculator_screen():
    screens = {item.screen for item in MENU_ITEMS}
    assert screens == set(Screen) - {Screen.MAIN_MENU}


class TestTaxPage:
    def test_empty_form(self, client):
        resp = client.get("/tax")
        assert resp.status_code == 200
        assert 'data-screen="tax"' in resp.text
        assert 'id="results"' not in resp.text

    def test_result_rendered_in_turkish_format(self, client):
        resp = client.post("/tax", data={"amount": "1.210,00"})
        assert resp.status_code == 200
        assert "1.000,00₺" in resp.text
        assert "100,00₺" in resp.text
        assert "110,00₺" in resp.text
        assert "1.210,00₺" in resp.text

    def test_invalid_amount_shows_nothing(self, client):
        resp = client.post("/tax", data={"amount": "0"})
        assert resp.status_code == 200
        assert 'id="results"' not in resp.text
        assert 'role="alert"' not in resp.text


class TestPolicyPage:
    def test_results_table(self, client):
        resp = client.post(
            "/policy",
            data={"start_date": "2024-03-30", "end_date": "2024-04-02", "total_amount": "300"},
        )
        assert resp.status_code == 200
        assert "2024 Q1" in resp.text
        assert "2024 Q2" in resp.text
        assert "200,00₺" in resp.text
        assert "TOPLAM" in resp.text
        assert "KKEG" not in resp.text

    def test_passenger_car_columns(self, client):
        resp = client.post(
            "/policy",
            data={
                "start_date": "2024-01-10",
                "end_date": "2024-01-20",
                "total_amount": "900",
                "is_passenger_car": "1",
            },
        )
        assert "KKEG (%30)" in resp.text
        assert "630,00₺" in resp.text
        assert "270,00₺" in resp.text
        assert "Kontrol Toplamı" in resp.text

    def test_missing_dates_error(self, client):
        resp = client.post("/policy", data={"start_date": "", "end_date": "", "total_amount": "900"})
        assert MISSING_DATES_MESSAGE in resp.text
        assert 'id="results"' not in resp.text

    def test_inverted_range_error(self, client):
        resp = client.post(
            "/policy",
            data={"start_date": "2024-02-01", "end_date": "2024-01-01", "total_amount": "900"},
        )
        assert INVERTED_RANGE_MESSAGE in resp.text
        assert 'id="results"' not in resp.text


class TestSummarizePage:
    def test_form_disables_resubmission(self, client):
        resp = client.get("/summarize")
        assert resp.status_code == 200
        assert "button.disabled = true" in resp.text

    def test_summary_rendered(self, client, fake_gemini):
        resp = client.post("/summarize", data={"text": "Uzun metin"})
        assert "Kısa özet." in resp.text
        assert 'role="alert"' not in resp.text

    def test_missing_key_message(self, client, no_gemini_key):
        resp = client.post("/summarize", data={"text": "Uzun metin"})
        assert MISSING_KEY_MESSAGE in resp.text

    def test_failure_message(self, client, fake_gemini):
        fake_gemini.side_effect = TimeoutError()
        resp = client.post("/summarize", data={"text": "Uzun metin"})
        assert FAILURE_MESSAGE in resp.text
        assert 'id="results"' not in resp.text
