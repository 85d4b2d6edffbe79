from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MakeBookingRequest(BaseModel):
    """座席予約リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [{"flightId": 43, "seatCodes": ["1A", "59A", "3K"]}]
        },
    )

    flight_id: int = Field(..., alias="flightId", ge=1, description="フライトID")

    seat_codes: list[str] = Field(
        ...,
        alias="seatCodes",
        description="予約する座席コード",
        examples=[["1A", "59A", "3K"]],
    )


class SearchFlightsRequest(BaseModel):
    """フライト検索クエリスキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(..., min_length=1, description="出発空港の名前またはコード")

    destination: str = Field(
        ..., min_length=1, description="到着空港の名前またはコード"
    )

    departure_date: date | None = Field(
        default=None,
        alias="departureDate",
        description="出発日（YYYY-MM-DD、出発空港の現地日付）",
        examples=["2022-08-21"],
    )

    day_range: int = Field(
        default=0, alias="dayRange", ge=0, description="出発日の前後に広げる日数"
    )
