from pydantic_settings import BaseSettings

from flipcalc.models.deal import Conventions, LoanBasis


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FLIPCALC_"}

    # Market data lookup
    market_api_url: str = "https://api.idealista.com/3.5/es"
    market_api_key: str = ""
    market_timeout_seconds: float = 15.0
    map_base_url: str = "https://www.idealista.com/buscar/venta-viviendas"

    # Formula conventions (see Conventions)
    loan_basis: LoanBasis = LoanBasis.PROJECT_COST
    agency_fees_include_vat: bool = True

    # App
    api_base_url: str = "http://localhost:8000"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def conventions(self) -> Conventions:
        return Conventions(
            loan_basis=self.loan_basis,
            agency_fees_include_vat=self.agency_fees_include_vat,
        )


settings = Settings()
