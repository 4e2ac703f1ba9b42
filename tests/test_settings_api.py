"""Tests for system settings, theme and the holiday calendar."""


def test_default_settings_created_on_first_read(api):
    body = api.get("/api/system-settings").json()

    assert body["timezone"] == "America/Sao_Paulo"
    assert body["showHolidays"] is True
    assert body["holidayRegion"] == "sao_paulo"
    assert body["workingDays"] == [1, 2, 3, 4, 5, 6]
    assert body["workingHours"] == {"start": "08:00", "end": "18:00"}


def test_update_working_schedule_changes_booking_rules(api, make_client, make_service, book):
    response = api.put(
        "/api/system-settings",
        json={"workingDays": [3, 1, 2, 1], "workingHours": {"start": "09:00", "end": "17:00"}},
    )
    assert response.status_code == 200
    assert response.json()["workingDays"] == [1, 2, 3]

    client = make_client()
    service = make_service()
    # Thursday 2025-01-09 10:00 local
    rejected = book(client["id"], service["id"], date="2025-01-09T13:00:00Z")

    assert rejected.status_code == 400
    assert rejected.json()["detail"]["error"] == "Quinta não é um dia de funcionamento"


def test_update_rejects_unsupported_timezone(api):
    response = api.put("/api/system-settings", json={"timezone": "Europe/Lisbon"})

    assert response.status_code == 422


def test_update_rejects_inverted_working_hours(api):
    response = api.put("/api/system-settings", json={"workingHours": {"start": "18:00", "end": "08:00"}})

    assert response.status_code == 422


def test_update_rejects_weekday_out_of_range(api):
    response = api.put("/api/system-settings", json={"workingDays": [1, 7]})

    assert response.status_code == 422


def test_options_list_supported_values(api):
    body = api.get("/api/system-settings/options").json()

    assert {"value": "America/Manaus", "label": "Manaus (UTC-4)"} in body["timezones"]
    assert any(r["value"] == "recife" for r in body["holidayRegions"])


def test_holidays_for_month(api):
    response = api.get("/api/calendar/holidays", params={"year": 2025, "month": 11})

    assert response.status_code == 200
    assert [h["date"] for h in response.json()] == ["2025-11-02", "2025-11-15", "2025-11-20"]


def test_holidays_hidden_when_disabled(api):
    api.put("/api/system-settings", json={"showHolidays": False})

    response = api.get("/api/calendar/holidays", params={"year": 2025, "month": 12})

    assert response.json() == []


def test_holidays_month_out_of_range(api):
    assert api.get("/api/calendar/holidays", params={"year": 2025, "month": 13}).status_code == 422


def test_default_theme(api):
    body = api.get("/api/theme").json()

    assert body["name"] == "Rosa Clássico"
    assert body["primaryColor"] == "#ec4899"


def test_update_theme_partially(api):
    response = api.put("/api/theme", json={"primaryColor": "#FF0000"})

    assert response.status_code == 200
    assert response.json()["primaryColor"] == "#ff0000"
    assert response.json()["textColor"] == "#1f2937"


def test_update_theme_rejects_bad_color(api):
    assert api.put("/api/theme", json={"primaryColor": "red"}).status_code == 422


def test_theme_presets(api):
    presets = api.get("/api/theme/presets").json()

    assert len(presets) == 4
    assert presets[0]["name"] == "Rosa Clássico"
