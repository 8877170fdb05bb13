"""부서/팀원 관리와 팀원 검색을 검증하는 테스트입니다."""

import pytest

from projex.models.project import Project


def _base(project) -> str:
    return f"/api/projects/{project['project_id']}"


def _add_department(client, headers, project, **fields) -> dict:
    resp = client.post(f"{_base(project)}/departments", json=fields, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["team"][-1]


def test_add_department_defaults(client, owner_headers, project):
    department = _add_department(client, owner_headers, project)
    assert department["title"] == "New Department"
    assert department["color"] == "#4A6CFA"
    assert department["members"] == []
    assert len(department["id"]) == 32


def test_add_department_with_supplied_id(client, owner_headers, project):
    department = _add_department(client, owner_headers, project, id="eng", title="Engineering", color="#000")
    assert department == {"id": "eng", "title": "Engineering", "color": "#000", "members": []}


def test_edit_department_only_overwrites_supplied_values(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng", title="Engineering", color="#000")
    resp = client.put(f"{_base(project)}/departments/eng", json={"title": "", "color": "#111"}, headers=owner_headers)
    assert resp.status_code == 200
    department = resp.json()["team"][0]
    assert department["title"] == "Engineering"
    assert department["color"] == "#111"


def test_delete_department_cascades_members(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    client.post(f"{_base(project)}/departments/eng/members", json={"name": "Kim"}, headers=owner_headers)

    resp = client.delete(f"{_base(project)}/departments/eng", headers=owner_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Department deleted successfully"}
    data = client.get(_base(project), headers=owner_headers).json()
    assert data["team"] == []

    assert client.delete(f"{_base(project)}/departments/eng", headers=owner_headers).status_code == 404


def test_add_member(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    resp = client.post(
        f"{_base(project)}/departments/eng/members",
        json={"id": "m1", "name": "Kim", "role": "Lead", "status": "active", "department": "Engineering"},
        headers=owner_headers,
    )
    assert resp.status_code == 201
    members = resp.json()["team"][0]["members"]
    assert members == [{"id": "m1", "name": "Kim", "role": "Lead", "status": "active", "department": "Engineering"}]


def test_add_member_requires_name(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    resp = client.post(f"{_base(project)}/departments/eng/members", json={"role": "Lead"}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Team member name is required"


def test_add_member_to_missing_department(client, owner_headers, project):
    resp = client.post(f"{_base(project)}/departments/nope/members", json={"name": "Kim"}, headers=owner_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Department not found"


def test_edit_member_keeps_identifier(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    client.post(f"{_base(project)}/departments/eng/members", json={"id": "m1", "name": "Kim"}, headers=owner_headers)

    resp = client.put(
        f"{_base(project)}/team/eng/members/m1",
        json={"id": "m2", "name": "Kim Minsu", "status": "away"},
        headers=owner_headers,
    )
    assert resp.status_code == 200
    member = resp.json()["team"][0]["members"][0]
    assert member["id"] == "m1"
    assert member["name"] == "Kim Minsu"
    assert member["status"] == "away"


def test_edit_missing_member_is_not_found(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    resp = client.put(f"{_base(project)}/team/eng/members/ghost", json={"name": "x"}, headers=owner_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Team member not found"


def test_delete_member_from_both_routes(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    for member_id in ("m1", "m2"):
        client.post(
            f"{_base(project)}/departments/eng/members",
            json={"id": member_id, "name": member_id},
            headers=owner_headers,
        )

    resp = client.delete(f"{_base(project)}/team/eng/members/m1", headers=owner_headers)
    assert resp.json() == {"message": "Team member deleted successfully"}
    resp = client.delete(f"{_base(project)}/departments/eng/members/m2", headers=owner_headers)
    assert resp.json() == {"message": "Team member removed successfully"}

    data = client.get(_base(project), headers=owner_headers).json()
    assert data["team"][0]["members"] == []


def test_replace_team(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng")
    team = [{"id": "ops", "title": "Ops", "members": [{"id": "x", "name": "Lee"}]}, {"title": "Loose"}]
    resp = client.put(f"{_base(project)}/team", json={"team": team}, headers=owner_headers)
    assert resp.status_code == 200
    ops, loose = resp.json()["team"]
    assert ops == team[0]
    assert loose["title"] == "Loose"
    assert loose["members"] == []
    assert len(loose["id"]) == 32

    resp = client.put(f"{_base(project)}/team", json={}, headers=owner_headers)
    assert resp.json()["team"] == []


def test_search_members(client, owner_headers, project):
    _add_department(client, owner_headers, project, id="eng", title="Engineering")
    _add_department(client, owner_headers, project, id="des", title="Design")
    client.post(f"{_base(project)}/departments/eng/members", json={"id": "k-01", "name": "Kim"}, headers=owner_headers)
    client.post(f"{_base(project)}/departments/des/members", json={"id": "p-02", "name": "Park"}, headers=owner_headers)
    client.post(f"{_base(project)}/departments/des/members", json={"id": "x-03", "name": "Akim"}, headers=owner_headers)

    resp = client.get(f"{_base(project)}/team/search", params={"query": "KIM"}, headers=owner_headers)
    assert resp.status_code == 200
    results = resp.json()
    assert [(r["department_id"], r["id"]) for r in results] == [("eng", "k-01"), ("des", "x-03")]
    assert results[0]["department_title"] == "Engineering"

    by_id = client.get(f"{_base(project)}/team/search", params={"query": "p-0"}, headers=owner_headers).json()
    assert [r["name"] for r in by_id] == ["Park"]


def test_search_requires_query(client, owner_headers, project):
    resp = client.get(f"{_base(project)}/team/search", headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Search query is required"


def test_replaced_team_with_numeric_ids_is_editable(client, owner_headers, project):
    team = [{"id": 1, "title": "Ops", "members": [{"id": 5, "name": "Lee"}, {"name": "Choi"}]}]
    resp = client.put(f"{_base(project)}/team", json={"team": team}, headers=owner_headers)
    assert resp.status_code == 200
    department = resp.json()["team"][0]
    assert department["id"] == "1"
    assert department["members"][0] == {"id": "5", "name": "Lee"}
    generated = department["members"][1]["id"]
    assert len(generated) == 32

    resp = client.get(f"{_base(project)}/team/search", params={"query": "lee"}, headers=owner_headers)
    assert resp.status_code == 200
    assert [(r["department_id"], r["id"]) for r in resp.json()] == [("1", "5")]

    resp = client.put(f"{_base(project)}/team/1/members/5", json={"role": "Lead"}, headers=owner_headers)
    assert resp.status_code == 200
    assert resp.json()["team"][0]["members"][0]["role"] == "Lead"

    assert client.delete(f"{_base(project)}/team/1/members/5", headers=owner_headers).status_code == 200
    assert client.delete(f"{_base(project)}/departments/1/members/{generated}", headers=owner_headers).status_code == 200
    resp = client.put(f"{_base(project)}/departments/1", json={"title": "Platform"}, headers=owner_headers)
    assert resp.json()["team"] == [{"id": "1", "title": "Platform", "members": []}]
    assert client.delete(f"{_base(project)}/departments/1", headers=owner_headers).status_code == 200


def test_project_replace_with_team_fills_ids(client, owner_headers, project):
    resp = client.put(
        _base(project),
        json={"team": [{"title": "Design", "members": [{"id": 2.0, "name": "Park"}]}]},
        headers=owner_headers,
    )
    assert resp.status_code == 200
    department = resp.json()["team"][0]
    assert len(department["id"]) == 32
    assert department["members"] == [{"id": "2", "name": "Park"}]

    resp = client.put(f"{_base(project)}/team/{department['id']}/members/2", json={"status": "away"}, headers=owner_headers)
    assert resp.status_code == 200


def test_search_tolerates_stored_non_string_ids(client, owner_headers, project, db):
    stored = db.query(Project).filter(Project.project_id == project["project_id"]).first()
    stored.team = [{"id": 10, "title": "Legacy", "members": [{"id": 42, "name": "Yoon", "role": 3}]}]
    db.commit()

    resp = client.get(f"{_base(project)}/team/search", params={"query": "yoon"}, headers=owner_headers)
    assert resp.status_code == 200
    result = resp.json()[0]
    assert result["department_id"] == "10"
    assert result["id"] == "42"
    assert result["role"] == "3"


TEAM_REQUESTS = [
    ("post", "/departments", {"title": "Eng"}),
    ("put", "/departments/eng", {"title": "Eng"}),
    ("delete", "/departments/eng", None),
    ("post", "/departments/eng/members", {"name": "Kim"}),
    ("put", "/team/eng/members/m1", {"name": "Kim"}),
    ("delete", "/team/eng/members/m1", None),
    ("delete", "/departments/eng/members/m1", None),
    ("put", "/team", {"team": []}),
    ("get", "/team/search?query=kim", None),
]


def _send(client, method, url, body, headers):
    if body is None:
        return getattr(client, method)(url, headers=headers)
    return getattr(client, method)(url, json=body, headers=headers)


@pytest.mark.parametrize("method,path,body", TEAM_REQUESTS)
def test_team_routes_hide_foreign_projects(client, owner_headers, other_headers, project, method, path, body):
    _add_department(client, owner_headers, project, id="eng")
    client.post(f"{_base(project)}/departments/eng/members", json={"id": "m1", "name": "Kim"}, headers=owner_headers)

    resp = _send(client, method, _base(project) + path, body, other_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Project not found"

    data = client.get(_base(project), headers=owner_headers).json()
    assert data["team"][0]["id"] == "eng"
    assert data["team"][0]["members"][0]["id"] == "m1"


@pytest.mark.parametrize("method,path,body", TEAM_REQUESTS)
def test_team_routes_with_malformed_project_id(client, owner_headers, method, path, body):
    resp = _send(client, method, "/api/projects/not-a-uuid" + path, body, owner_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Project not found"
