"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "H-R 다이어그램 탐색기",
        "en": "H-R Diagram Explorer",
    },
    "app_title": {
        "ko": "헤르츠스프룽–러셀 다이어그램",
        "en": "Hertzsprung–Russell Diagram App",
    },
    "sidebar_header": {
        "ko": "🔭 별 정보",
        "en": "🔭 Star Information",
    },
    "label_select_star": {
        "ko": "별 선택:",
        "en": "Select a Star:",
    },
    "no_selection": {
        "ko": "선택한 별을 데이터에서 찾을 수 없어요.",
        "en": "The selected star is not in the dataset.",
    },
    "no_description": {
        "ko": "설명 없음",
        "en": "No description available",
    },
    "units_guide": {
        "ko": (
            "<strong>단위 안내:</strong><br>"
            "• 반지름 (R☉): 태양 반지름 (≈ 695,700 km)<br>"
            "• 광도 (L☉): 태양 광도 (로그 스케일)<br>"
            "• 온도 (K): 표면 온도<br>"
            "• 색지수 (B–V): 파랑 → 빨강"
        ),
        "en": (
            "<strong>Units & Guide:</strong><br>"
            "• Radius (R☉): Sun’s radius (≈ 695,700 km)<br>"
            "• Luminosity (L☉): Sun’s brightness (log scale)<br>"
            "• Temp (K): surface temperature<br>"
            "• Color Index (B–V): blue → red"
        ),
    },
    "tab_chart": {
        "ko": "H-R 다이어그램",
        "en": "H-R Diagram",
    },
    "tab_table": {
        "ko": "데이터 표",
        "en": "Data Table",
    },
    "hover_hint": {
        "ko": "ℹ️ 점 위에 마우스를 올리면 자세히 보여요: 크기 = 반지름, 색 = 온도",
        "en": "ℹ️ Hover over points for details: Size = Radius, Color = Temperature",
    },
    "error_load": {
        "ko": "데이터를 불러올 수 없어요. ({error})",
        "en": "Could not load the star data. ({error})",
    },
    "chart_title": {
        "ko": "헤르츠스프룽–러셀 다이어그램",
        "en": "Hertzsprung–Russell Diagram",
    },
    "axis_x": {
        "ko": "색지수 (B–V)",
        "en": "Color Index (B–V)",
    },
    "axis_y": {
        "ko": "로그 광도 (L☉)",
        "en": "Log Luminosity (L☉)",
    },
    "colorbar_title": {
        "ko": "온도 (K)",
        "en": "Temperature (K)",
    },
    "trace_stars": {
        "ko": "별",
        "en": "stars",
    },
    "trace_undefined": {
        "ko": "로그 광도 정의 안 됨",
        "en": "log L undefined",
    },
    "detail_name": {
        "ko": "이름",
        "en": "Name",
    },
    "detail_alt_name": {
        "ko": "다른 이름",
        "en": "Alt Name",
    },
    "detail_spectral_type": {
        "ko": "분광형",
        "en": "Spectral Type",
    },
    "detail_temperature": {
        "ko": "온도",
        "en": "Temperature",
    },
    "detail_radius": {
        "ko": "반지름",
        "en": "Radius",
    },
    "detail_log_luminosity": {
        "ko": "로그 광도",
        "en": "Log Luminosity",
    },
    "detail_color_index": {
        "ko": "색지수 (B–V)",
        "en": "Color Index (B–V)",
    },
    "detail_type_info": {
        "ko": "분광형 설명",
        "en": "Type Info",
    },
    "col_name": {
        "ko": "이름",
        "en": "Name",
    },
    "col_alt_name": {
        "ko": "다른 이름",
        "en": "Alt Name",
    },
    "col_spect_type": {
        "ko": "분광형",
        "en": "Spectral Type",
    },
    "col_temp": {
        "ko": "온도 (K)",
        "en": "Temp (K)",
    },
    "col_R": {
        "ko": "반지름 (R☉)",
        "en": "Radius (R☉)",
    },
    "col_log_L": {
        "ko": "로그 광도 (L☉)",
        "en": "Log L (L☉)",
    },
    "col_bv_color": {
        "ko": "B–V",
        "en": "B–V",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
