from faculty_pay.comparison import compare_position, project_position
from faculty_pay.pay_matrix import get_position
from faculty_pay.scenario_log import SCENARIO_TABLE, build_scenario_row, client_from_secrets, record_scenario
from faculty_pay.settings import PolicySettings


class FakeQuery:

    def __init__(self, client, table):
        self.client = client
        self.table = table

    def insert(self, row):
        self.client.inserted.append((self.table, row))
        return self

    def execute(self):
        return "ok"


class FakeClient:

    def __init__(self):
        self.inserted = []

    def table(self, name):
        return FakeQuery(self, name)


def _row():
    settings = PolicySettings()
    result = compare_position(settings, 1, 0)
    eighth = project_position(settings, 1, result)
    return build_scenario_row(get_position(1), 0, 58, "Y", 1.3, 300000, "soft", result, eighth)


def test_missing_credentials_gives_no_client():
    assert client_from_secrets({}) is None
    assert client_from_secrets({"supabase_url": "https://example.supabase.co"}) is None


def test_scenario_row():
    row = _row()
    assert row["Position"] == "Assistant Professor (Entry Level)"
    assert row["Level"] == "10"
    assert row["Pay Cell"] == 1
    assert row["City Type"] == "Y"
    assert row["Strategy"] == "multiplier"
    assert row["Method"] == "methodA"
    assert row["Enforcement Mode"] == "soft"
    assert row["UGC Annual"] == 1300728
    assert row["WPU CTC Annual"] == 181442 * 12
    assert row["Salary Capped"] is False


def test_record_scenario_inserts_row(caplog):
    client = FakeClient()
    row = _row()
    with caplog.at_level("INFO", logger="faculty_pay.scenario_log"):
        assert record_scenario(client, row) == "ok"
    assert client.inserted == [(SCENARIO_TABLE, row)]
    assert "Recorded scenario" in caplog.text
