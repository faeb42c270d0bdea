import pytest

from ssixwallet.nodes import (
    DEFAULT_RPC_PORT,
    SSL_PORT_OFFSET,
    ConnectionMode,
    NodeList,
    NodeSetting,
    effective_local_port,
    is_valid_node,
    toggle_ssl_port,
)


@pytest.fixture
def nodes():
    return [
        NodeSetting("node1.example.com", 32348, "/", False),
        NodeSetting("node2.example.com", 32448, "/rpc/", True),
    ]


def test_add_reports_change(nodes):
    seen = []
    node_list = NodeList(nodes[:1], seen.append)
    node_list.add(nodes[1])
    assert len(node_list) == 2
    assert node_list[1] == nodes[1]
    assert seen == [nodes]


def test_remove_reports_change(nodes):
    seen = []
    node_list = NodeList(nodes, seen.append)
    node_list.remove(0)
    assert list(node_list) == [nodes[1]]
    assert seen == [[nodes[1]]]


def test_remove_out_of_range(nodes):
    node_list = NodeList(nodes)
    with pytest.raises(IndexError):
        node_list.remove(5)


def test_index_of_matches_all_fields(nodes):
    node_list = NodeList(nodes)
    assert node_list.index_of(NodeSetting("node2.example.com", 32448, "/rpc/", True)) == 1
    with pytest.raises(ValueError):
        node_list.index_of(NodeSetting("node2.example.com", 32448, "/rpc/", False))


def test_current_row_is_checked(nodes):
    node_list = NodeList(nodes)
    assert node_list.is_checked(0)
    node_list.set_current(1)
    assert node_list.is_checked(1)
    assert not node_list.is_checked(0)


def test_display_columns(nodes):
    node_list = NodeList(nodes)
    assert node_list.display(1, 1) == "node2.example.com"
    assert node_list.display(1, 2) == 32448
    assert node_list.display(1, 3) == "/rpc/"
    assert node_list.display(1, 0) is None


def test_input_list_is_copied(nodes):
    node_list = NodeList(nodes)
    node_list.add(NodeSetting("node3.example.com", 80))
    assert len(nodes) == 2
    assert len(node_list) == 3


@pytest.mark.parametrize(
    "node, valid",
    [
        (NodeSetting("node.example.com", 32348, "/"), True),
        (NodeSetting("127.0.0.1", 8080, "/json_rpc/"), True),
        (NodeSetting("my-node", 8080, "/a/b-c/"), True),
        (NodeSetting("-bad", 8080, "/"), False),
        (NodeSetting("bad-", 8080, "/"), False),
        (NodeSetting("bad host", 8080, "/"), False),
        (NodeSetting("node.example.com", 0, "/"), False),
        (NodeSetting("node.example.com", 65535, "/"), False),
        (NodeSetting("node.example.com", 65534, "/"), True),
        (NodeSetting("node.example.com", 8080, "/json_rpc"), False),
        (NodeSetting("node.example.com", 8080, ""), False),
        (NodeSetting("node.example.com", 8080, "//"), False),
    ],
)
def test_is_valid_node(node, valid):
    assert is_valid_node(node) is valid


@pytest.mark.parametrize("port", [101, 8080, 32348, 65435])
def test_toggle_ssl_round_trip(port):
    on = toggle_ssl_port(port, True)
    assert on - port == SSL_PORT_OFFSET
    assert toggle_ssl_port(on, False) == port


def test_toggle_ssl_limits():
    assert toggle_ssl_port(100, False) == 100
    assert toggle_ssl_port(65500, True) == 65500


def test_effective_local_port():
    assert effective_local_port(0) == DEFAULT_RPC_PORT
    assert effective_local_port(18081) == 18081


def test_connection_mode_values():
    assert ConnectionMode("remote") is ConnectionMode.REMOTE
    assert [mode.value for mode in ConnectionMode] == ["auto", "embedded", "local", "remote"]