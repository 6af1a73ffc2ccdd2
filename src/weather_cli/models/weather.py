"""Current weather response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Condition(BaseModel):
    """One entry of the ``weather`` array."""

    model_config = ConfigDict(frozen=True)

    main: str
    description: str
    icon: str


class MainMeasurements(BaseModel):
    model_config = ConfigDict(frozen=True)

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: float = 0.0
    deg: float = 0.0


class Clouds(BaseModel):
    model_config = ConfigDict(frozen=True)

    all: int = 0


class SunInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str = ""
    sunrise: int
    sunset: int


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lon: float
    lat: float


class WeatherReading(BaseModel):
    """Flattened display model built from one successful API call.

    Temperatures are Celsius as returned by the provider; Fahrenheit is
    always derived at render time.
    """

    model_config = ConfigDict(frozen=True)

    place_name: str
    country_code: str
    condition_main: str
    condition_description: str
    icon_code: str
    temp_c: float
    feels_like_c: float
    temp_max_c: float
    temp_min_c: float
    humidity_pct: int
    pressure_hpa: int
    wind_speed_ms: float
    wind_degrees: float
    cloud_cover_pct: int
    visibility_m: int | None
    sunrise_epoch: int
    sunset_epoch: int
    longitude: float
    latitude: float


class CurrentWeatherResponse(BaseModel):
    """Body of a successful ``/weather`` call (only the fields we display)."""

    model_config = ConfigDict(frozen=True)

    cod: int | str
    name: str
    weather: list[Condition] = Field(min_length=1)
    main: MainMeasurements
    wind: Wind = Wind()
    clouds: Clouds = Clouds()
    visibility: int | None = None
    sys: SunInfo
    coord: Coordinates

    def to_reading(self) -> WeatherReading:
        condition = self.weather[0]
        return WeatherReading(
            place_name=self.name,
            country_code=self.sys.country,
            condition_main=condition.main,
            condition_description=condition.description,
            icon_code=condition.icon,
            temp_c=self.main.temp,
            feels_like_c=self.main.feels_like,
            temp_max_c=self.main.temp_max,
            temp_min_c=self.main.temp_min,
            humidity_pct=self.main.humidity,
            pressure_hpa=self.main.pressure,
            wind_speed_ms=self.wind.speed,
            wind_degrees=self.wind.deg,
            cloud_cover_pct=self.clouds.all,
            visibility_m=self.visibility,
            sunrise_epoch=self.sys.sunrise,
            sunset_epoch=self.sys.sunset,
            longitude=self.coord.lon,
            latitude=self.coord.lat,
        )
