import pytest

from servicetrade import ListResponse, ProtocolError, parse_list
from servicetrade.resources import ServiceLine


def service_lines(count):
    return [{"id": i, "name": f"Line {i}", "abbr": f"L{i}"} for i in range(1, count + 1)]


class TestParseList:
    """Test suite for parse_list"""

    def test_items_are_hydrated_in_order(self):
        raw = service_lines(3)
        payload = {"data": {"servicelines": raw, "total": 3, "page": 1, "per_page": 100}}

        response = parse_list(ServiceLine, payload, "servicelines")

        assert isinstance(response, ListResponse)
        assert len(response.items) == len(raw)
        assert [item.id for item in response.items] == [1, 2, 3]
        assert response.items[0].abbr == "L1"
        assert response.data is response.items

    def test_pagination_defaults_to_request(self):
        payload = {"data": {"servicelines": service_lines(2)}}

        response = parse_list(ServiceLine, payload, "servicelines", page=3, per_page=25)

        assert response.page == 3
        assert response.per_page == 25
        assert response.total == 2
        assert response.total_pages is None

    def test_pagination_from_envelope(self):
        payload = {
            "data": {
                "servicelines": service_lines(1),
                "total": 51,
                "page": 2,
                "per_page": 50,
                "totalPages": 2,
            }
        }

        response = parse_list(ServiceLine, payload, "servicelines")

        assert response.page == 2
        assert response.per_page == 50
        assert response.total == 51
        assert response.total_pages == 2
        assert not response.has_next_page

    def test_has_next_page_from_total(self):
        payload = {"data": {"servicelines": service_lines(2), "total": 5, "per_page": 2}}

        assert parse_list(ServiceLine, payload, "servicelines").has_next_page

    def test_missing_array_key_is_empty(self):
        response = parse_list(ServiceLine, {"data": {}}, "servicelines")

        assert response.items == []
        assert response.total == 0

    @pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": []}, None])
    def test_missing_data(self, payload):
        with pytest.raises(ProtocolError):
            parse_list(ServiceLine, payload, "servicelines")

    def test_non_array_items(self):
        with pytest.raises(ProtocolError):
            parse_list(ServiceLine, {"data": {"servicelines": {"id": 1}}}, "servicelines")

    def test_more_items_than_per_page_are_kept(self):
        payload = {"data": {"servicelines": service_lines(150)}}

        response = parse_list(ServiceLine, payload, "servicelines")

        assert len(response.items) == 150
        assert response.items[-1].id == 150
        assert response.per_page == 150
        assert response.total == 150

    def test_envelope_per_page_grows_to_item_count(self):
        payload = {"data": {"servicelines": service_lines(3), "per_page": 2}}

        response = parse_list(ServiceLine, payload, "servicelines")

        assert len(response) == 3
        assert response.per_page == 3

    def test_page_below_one_falls_back_to_request(self):
        payload = {"data": {"servicelines": [], "page": 0}}

        response = parse_list(ServiceLine, payload, "servicelines", page=2)

        assert response.page == 2
        assert response.items == []

    def test_sequence_protocol(self):
        response = parse_list(ServiceLine, {"data": {"servicelines": service_lines(2)}}, "servicelines")

        assert len(response) == 2
        assert response[1].id == 2
        assert [line.name for line in response] == ["Line 1", "Line 2"]
