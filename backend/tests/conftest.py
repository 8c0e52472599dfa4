"""Pytest configuration and fixtures."""

from dataclasses import replace
from datetime import date

import pytest

from app.models.domain.client import ClientProfile
from app.models.domain.lender import LenderCriteria
from app.services.catalog_service import LenderCatalog

# Fixed reference date so business ages are deterministic.
TODAY = date(2025, 6, 15)

_ACME_ROW = [
    "Acme Capital", "MCA", "550", "", "6", "", "", "10000", "", "Retail", "",
    None, "", "CA,NY", "", "", "no", "", "5000", "250000", "", "", "",
    None, "", "",
]


def _base_profile() -> ClientProfile:
    return ClientProfile(
        client_name="Dana Reyes",
        company_name="Reyes Landscaping LLC",
        company_state="TX",
        capital_requested=50000,
        loan_purpose="Working capital",
        avg_monthly_deposits=40000,
        avg_annual_revenue=480000,
        legal_entity_type="LLC",
        business_start_date="2022-03-01",
        credit_score="650-700",
        industry="Landscaping",
        avg_monthly_deposit_count=12,
    )


@pytest.fixture
def acme_row():
    """Reference spreadsheet row for Acme Capital in column order."""
    return list(_ACME_ROW)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_profile():
    """Factory for client profiles; keyword arguments override defaults."""

    def _make(**overrides) -> ClientProfile:
        return replace(_base_profile(), **overrides)

    return _make


@pytest.fixture
def profile(make_profile):
    return make_profile()


@pytest.fixture
def acme_lender():
    return LenderCriteria(
        lender_name="Acme Capital",
        specialty="MCA",
        min_fico=550,
        time_in_business_months=6,
        average_monthly_revenue=10000,
        preferred_industries="Retail",
        restricted_states="CA,NY",
        allows_bankruptcies=False,
        min_funding_size=5000,
        max_funding_size=250000,
    )


@pytest.fixture
def open_lender():
    """A lender that publishes no criteria at all."""
    return LenderCriteria(lender_name="Open Door Funding")


@pytest.fixture
def catalog(acme_lender, open_lender):
    return LenderCatalog(
        [
            acme_lender,
            open_lender,
            LenderCriteria(
                lender_name="Prime SBA Partners",
                specialty="SBA",
                min_fico=700,
                time_in_business_months=24,
                average_monthly_revenue=25000,
                min_funding_size=50000,
                max_funding_size=5000000,
                payment_type="Monthly",
            ),
        ]
    )
