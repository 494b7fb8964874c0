"""Tests for SEC filings endpoints."""

from pytest_httpx import HTTPXMock

from massive_client.client import RESTClient
from massive_client.filings import (
    FilingSectionsParams,
    RiskCategoriesParams,
    RiskFactorsParams,
    get_filing_sections,
    get_risk_categories,
    get_risk_factors,
)


class TestFilingSections:
    """Tests for 10-K sections."""

    def test_sections(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(
            json={
                "status": "OK",
                "results": [
                    {
                        "cik": "0000320193",
                        "ticker": "AAPL",
                        "section": "risk_factors",
                        "filing_date": "2024-11-01",
                        "period_end": "2024-09-28",
                        "text": "Our business is subject to risks...",
                    }
                ],
            }
        )

        params = FilingSectionsParams(ticker="AAPL", section="risk_factors", filing_date_gt="2024-01-01")
        result = get_filing_sections(client, params)

        assert result.results[0].period_end == "2024-09-28"
        assert result.results[0].text.startswith("Our business")

        request = httpx_mock.get_request()
        assert request.url.path == "/stocks/filings/10-K/vX/sections"
        assert request.url.params["section"] == "risk_factors"
        assert request.url.params["filing_date.gt"] == "2024-01-01"


class TestRiskFactors:
    """Tests for risk factor disclosures and taxonomy."""

    def test_risk_factors(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(
            json={
                "status": "OK",
                "results": [
                    {
                        "ticker": "AAPL",
                        "primary_category": "Operational",
                        "secondary_category": "Supply Chain",
                        "tertiary_category": "Supplier Concentration",
                        "supporting_text": "We depend on a limited number of suppliers.",
                    }
                ],
            }
        )

        result = get_risk_factors(client, RiskFactorsParams(ticker="AAPL", limit=10))

        assert result.results[0].secondary_category == "Supply Chain"
        request = httpx_mock.get_request()
        assert request.url.path == "/stocks/filings/vX/risk-factors"
        assert request.url.params["limit"] == "10"

    def test_risk_categories(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test the taxonomy version decodes as a number."""
        httpx_mock.add_response(
            json={
                "status": "OK",
                "results": [
                    {"primary_category": "Financial", "description": "Liquidity", "taxonomy": 1.1}
                ],
            }
        )

        result = get_risk_categories(client, RiskCategoriesParams(primary_category="Financial"))

        assert result.results[0].taxonomy == 1.1
        request = httpx_mock.get_request()
        assert request.url.path == "/stocks/taxonomies/vX/risk-factors"
        assert request.url.params["primary_category"] == "Financial"
