"""Record calculator scenarios to a Supabase table for later review."""

import logging

from supabase import Client, PostgrestAPIError, create_client

from faculty_pay.pay_data import CityType, EnforcementMode

logger = logging.getLogger(__name__)

SCENARIO_TABLE = "WPU_Scenarios"


def client_from_secrets(secrets):
    url = secrets.get("supabase_url")
    key = secrets.get("supabase_key")
    if not url or not key:
        return None
    return create_client(url, key)


def build_scenario_row(position, cell_index, da_percent, city_type, multiplier, annual_premium,
                       enforcement_mode, result, eighth_cpc):
    ugc = result.ugc
    wpu = result.wpu
    return {
        "Position": position.title,
        "Level": position.level,
        "Pay Cell": int(cell_index) + 1,
        "DA (%)": float(da_percent),
        "City Type": CityType(city_type).value,
        "Multiplier": float(multiplier),
        "Annual Premium": int(annual_premium),
        "Strategy": wpu.strategy.value,
        "Method": wpu.method.value,
        "Enforcement Mode": EnforcementMode(enforcement_mode).value,
        "UGC Monthly": int(ugc.total_monthly),
        "UGC Annual": int(ugc.total_annual),
        "WPU Salary Annual": int(wpu.total_salary_annual),
        "WPU CTC Annual": int(wpu.total_ctc_annual),
        "Premium Annual": int(result.premium_amount_annual),
        "Premium (%)": round(float(result.premium_percentage), 2),
        "8th CPC Annual": int(eighth_cpc.total_annual),
        "Salary Capped": wpu.enforcement.salary_capped,
        "CTC Capped": wpu.enforcement.ctc_capped,
    }


def record_scenario(client: Client, row, table=SCENARIO_TABLE):
    response = client.table(table).insert(row).execute()
    logger.info("Recorded scenario for %s in %s", row.get("Position"), table)
    return response
