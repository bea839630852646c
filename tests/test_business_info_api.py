from service.business_info_search import DATE_FORMAT_ERROR_MESSAGE


class TestSearchEndpoint:
    def test_keyword_search_shape(self, client, records):
        response = client.get("/search", params={"keyword": "강남구"})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"data", "total", "page", "limit"}
        assert body["total"] == 2
        assert (body["page"], body["limit"]) == (1, 10)
        assert [row["businessName"] for row in body["data"]] == ["Charlie Books", "Garam Trading"]

    def test_records_use_camel_case_and_display_dates(self, client, records):
        row = client.get("/search", params={"keyword": "110111"}).json()["data"][0]

        assert row["corporateRegistrationNumber"] == "110111-1234567"
        assert row["businessAddressDetail"] == "3층"
        assert row["isDeleted"] is False
        assert row["createdAt"] == "2024-01-15 10:00:00"
        assert row["updatedAt"] == "2024-02-01 09:00:00"

    def test_missing_keyword_lists_everything(self, client, records):
        body = client.get("/search", params={"page": 2, "limit": 2}).json()

        assert body["total"] == 5
        assert [row["businessName"] for row in body["data"]] == ["Charlie Books", "Delta Mart"]

    def test_invalid_paging_rejected(self, client, records):
        assert client.get("/search", params={"page": 0}).status_code == 422
        assert client.get("/search", params={"limit": 0}).status_code == 422
        assert client.get("/search", params={"limit": 101}).status_code == 422


class TestDateRangeEndpoint:
    def test_date_range(self, client, records):
        response = client.get(
            "/search/date-range",
            params={"startDate": "2024-01-01", "endDate": "2024/01/31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert [row["businessName"] for row in body["data"]] == [
            "Beta Logistics",
            "Garam Trading",
            "Alpha Foods",
        ]

    def test_bad_format_is_400(self, client, records):
        response = client.get(
            "/search/date-range",
            params={"startDate": "2024.01.01", "endDate": "2024-01-31"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": DATE_FORMAT_ERROR_MESSAGE}

    def test_calendar_invalid_is_400(self, client, records):
        response = client.get(
            "/search/date-range",
            params={"startDate": "2024-13-01", "endDate": "2024-01-31", "page": 1, "limit": 10},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == DATE_FORMAT_ERROR_MESSAGE

    def test_missing_dates_is_422(self, client, records):
        assert client.get("/search/date-range", params={"startDate": "2024-01-01"}).status_code == 422
