"""
Tests for the tool handlers.

Each test checks the caller-facing -> GraphQL variable mapping and, for
composites, the order of upstream calls.
"""

import pytest
from conftest import RecordingGitHub, RecordingTransport

from zenhub_mcp import queries
from zenhub_mcp.errors import GitHubAPIError, ToolInputError
from zenhub_mcp.tools import dependencies, epics, issues, labels, milestones, sprints, users, workspaces
from zenhub_mcp.tools import queries as query_tools
from zenhub_mcp.tools.base import compact


class TestCompact:

    def test_drops_falsy_values(self):
        assert compact(a="x", b=None, c="", d=[], e=0) == {"a": "x"}


class TestIssueHelpers:

    @pytest.mark.parametrize("labels,expected", [
        (["bug"], "Bug"),
        (["enhancement", "BUG"], "Bug"),
        (["enhancement"], "Task"),
        ([], "Task"),
        (None, "Task"),
    ])
    def test_issue_type_for(self, labels, expected):
        assert issues.issue_type_for(labels) == expected

    def test_parse_issue_url(self):
        assert issues.parse_issue_url("https://github.com/acme/api/issues/42") == ("acme", "api", "42")

    def test_parse_issue_url_rejects_garbage(self):
        with pytest.raises(ToolInputError, match="Unable to parse issue URL"):
            issues.parse_issue_url("https://example.com/nope")


class TestCreateIssue:

    CREATED = {
        "createIssue": {
            "issue": {"id": "Z1", "number": 42, "htmlUrl": "https://github.com/acme/api/issues/42"},
        },
    }

    async def test_maps_arguments(self):
        transport = RecordingTransport(self.CREATED)

        await issues.create_issue.handler(
            {"title": "Crash", "repository_id": "R1", "labels": ["bug"]}, transport
        )

        assert transport.calls[0][0] == queries.CREATE_ISSUE
        assert transport.variables[0] == {
            "input": {
                "title": "Crash",
                "repositoryId": "R1",
                "body": "",
                "labels": ["bug"],
                "assignees": [],
            },
        }

    async def test_without_github_skips_type_update(self):
        transport = RecordingTransport(self.CREATED)

        response = await issues.create_issue.handler({"title": "Crash", "repository_id": "R1"}, transport)

        assert response.payload() == {
            "createdIssue": self.CREATED["createIssue"]["issue"],
            "updatedIssue": None,
        }

    async def test_sets_bug_type_from_labels(self):
        github = RecordingGitHub(result={"number": 42, "type": "Bug"})
        transport = RecordingTransport(self.CREATED, github=github)

        response = await issues.create_issue.handler(
            {"title": "Crash", "repository_id": "R1", "labels": ["bug"]}, transport
        )

        assert github.calls == [("acme", "api", "42", "Bug")]
        assert response.payload()["updatedIssue"] == {"number": 42, "type": "Bug"}

    async def test_github_failure_names_created_issue(self):
        github = RecordingGitHub(error=GitHubAPIError("Forbidden", "no access", status_code=403))
        transport = RecordingTransport(self.CREATED, github=github)

        with pytest.raises(ToolInputError) as excinfo:
            await issues.create_issue.handler({"title": "Crash", "repository_id": "R1"}, transport)

        message = str(excinfo.value)
        assert "Z1" in message
        assert "Failed to update issue: Forbidden" in message
        assert isinstance(excinfo.value.__cause__, GitHubAPIError)
        # the ZenHub issue was still created
        assert len(transport.calls) == 1

    async def test_unparseable_url_names_created_issue(self):
        github = RecordingGitHub()
        transport = RecordingTransport(
            {"createIssue": {"issue": {"id": "Z2", "htmlUrl": "not-a-github-url"}}}, github=github
        )

        with pytest.raises(ToolInputError) as excinfo:
            await issues.create_issue.handler({"title": "Crash", "repository_id": "R1"}, transport)

        assert "Z2" in str(excinfo.value)
        assert "Unable to parse issue URL" in str(excinfo.value)
        assert github.calls == []


class TestIssueMutations:

    async def test_update_issue_omits_empty_fields(self):
        transport = RecordingTransport()

        await issues.update_issue.handler({"issue_id": "I1", "title": "New"}, transport)

        assert transport.variables == [{"input": {"issueId": "I1", "title": "New"}}]

    async def test_reopen_defaults_position(self):
        transport = RecordingTransport()

        await issues.reopen_issues.handler({"issue_ids": ["I1"], "pipeline_id": "P1"}, transport)

        assert transport.variables == [
            {"input": {"issueIds": ["I1"], "pipelineId": "P1", "position": "START"}},
        ]

    async def test_move_issue_moves_each_issue_in_order(self):
        transport = RecordingTransport({"moveIssue": {"issue": {"id": "I1"}}}, {"moveIssue": {"issue": {"id": "I2"}}})

        response = await issues.move_issue.handler(
            {"issue_ids": ["I1", "I2"], "pipeline_id": "P1", "position": 0}, transport
        )

        assert [v["input"]["issueId"] for v in transport.variables] == ["I1", "I2"]
        assert response.payload() == {"moveIssue": [{"issue": {"id": "I1"}}, {"issue": {"id": "I2"}}]}

    async def test_assignees_and_labels_are_renamed(self):
        transport = RecordingTransport()

        await issues.add_assignees_to_issues.handler({"issue_ids": ["I1"], "assignees": ["U1"]}, transport)
        await issues.remove_labels_from_issues.handler({"issue_ids": ["I1"], "labels": ["L1"]}, transport)

        assert transport.variables == [
            {"input": {"issueIds": ["I1"], "assigneeIds": ["U1"]}},
            {"input": {"issueIds": ["I1"], "labelIds": ["L1"]}},
        ]

    async def test_same_input_maps_the_same_way_every_time(self):
        transport = RecordingTransport()
        args = {"issue_id": "I1", "value": 3}

        await issues.set_estimate.handler(args, transport)
        await issues.set_estimate.handler(args, transport)

        assert transport.variables[0] == transport.variables[1] == {"input": {"issueId": "I1", "value": 3}}

    async def test_set_multiple_estimates_keeps_input_order(self):
        transport = RecordingTransport({"setEstimate": {"issue": {"id": "I1"}}}, {"setEstimate": {"issue": {"id": "I2"}}})

        response = await issues.set_multiple_estimates.handler(
            {"estimates": [{"issue_id": "I1", "value": 1}, {"issue_id": "I2", "value": 5}]}, transport
        )

        assert len(transport.calls) == 2
        assert response.payload() == [{"setEstimate": {"issue": {"id": "I1"}}}, {"setEstimate": {"issue": {"id": "I2"}}}]

    async def test_set_multiple_estimates_requires_a_list(self):
        with pytest.raises(ToolInputError):
            await issues.set_multiple_estimates.handler({"estimates": "3"}, RecordingTransport())


class TestCreateIssueWithEpic:

    async def test_adds_new_issue_to_epic(self):
        transport = RecordingTransport(
            {"createIssue": {"issue": {"id": "N1"}}},
            {"addIssuesToEpics": {"epics": [{"id": "E1"}]}},
        )

        response = await issues.create_issue_with_epic.handler(
            {"title": "T", "repository_id": "R1", "epic_id": "E1"}, transport
        )

        assert transport.calls[1][0] == queries.ADD_ISSUES_TO_EPICS
        assert transport.variables[1] == {"input": {"issueIds": ["N1"], "epicIds": ["E1"]}}
        assert response.payload() == {"createdIssue": {"id": "N1"}, "addedToEpic": [{"id": "E1"}]}

    async def test_second_step_failure_reports_created_issue(self):
        transport = RecordingTransport({"createIssue": {"issue": {"id": "N1"}}}, RuntimeError("epic not found"))

        with pytest.raises(ToolInputError) as excinfo:
            await issues.create_issue_with_epic.handler(
                {"title": "T", "repository_id": "R1", "epic_id": "E1"}, transport
            )

        message = str(excinfo.value)
        assert message.startswith("Error creating issue with epic: ")
        assert "N1" in message
        assert "epic not found" in message
        assert len(transport.calls) == 2

    async def test_missing_issue_id_stops_before_second_call(self):
        transport = RecordingTransport({"createIssue": {"issue": None}})

        with pytest.raises(ToolInputError, match="Failed to create issue"):
            await issues.create_issue_with_epic.handler(
                {"title": "T", "repository_id": "R1", "epic_id": "E1"}, transport
            )

        assert len(transport.calls) == 1


class TestCreateEpic:

    async def test_second_call_uses_created_issue_id(self):
        transport = RecordingTransport(
            {"createEpic": {"epic": {"id": "EP0", "issue": {"id": "X1"}}}},
            {"createEpicFromIssue": {"epic": {"id": "EP1"}}},
        )

        response = await epics.create_epic.handler(
            {"title": "Epic", "repository_id": "R1", "epic_child_ids": ["C1"]}, transport
        )

        assert [document for document, _ in transport.calls] == [
            queries.CREATE_EPIC,
            queries.CREATE_EPIC_FROM_ISSUE,
        ]
        assert transport.variables[0] == {"input": {"issue": {"title": "Epic", "repositoryId": "R1", "body": ""}}}
        assert transport.variables[1] == {"input": {"issueId": "X1", "epicChildIds": ["C1"]}}
        assert response.payload() == {
            "createEpic": {"id": "EP0", "issue": {"id": "X1"}},
            "convertToEpic": {"id": "EP1"},
        }

    async def test_second_call_failure_still_visible(self):
        transport = RecordingTransport(
            {"createEpic": {"epic": {"issue": {"id": "X1"}}}},
            RuntimeError("conversion failed"),
        )

        with pytest.raises(ToolInputError) as excinfo:
            await epics.create_epic.handler({"title": "Epic", "repository_id": "R1"}, transport)

        assert "X1" in str(excinfo.value)
        assert "conversion failed" in str(excinfo.value)
        assert transport.calls[0][0] == queries.CREATE_EPIC
        assert transport.variables[1]["input"]["issueId"] == "X1"

    async def test_missing_issue_id_is_an_error(self):
        transport = RecordingTransport({"createEpic": {"epic": None}})

        with pytest.raises(ToolInputError, match="underlying issue"):
            await epics.create_epic.handler({"title": "Epic", "repository_id": "R1"}, transport)

        assert len(transport.calls) == 1

    async def test_update_epic_dates(self):
        transport = RecordingTransport()

        await epics.update_epic_dates.handler(
            {"epic_id": "E1", "start_date": "2024-01-01", "end_date": "2024-02-01"}, transport
        )

        assert transport.variables == [
            {"input": {"zenhubEpicId": "E1", "startOn": "2024-01-01", "endOn": "2024-02-01"}},
        ]


class TestWorkspaceTools:

    async def test_user_workspaces_without_query_lists_from_orgs(self):
        transport = RecordingTransport()

        await workspaces.get_user_workspaces.handler({}, transport)

        assert transport.calls == [(queries.GET_USER_WORKSPACES_FROM_ORGS, {"first": 20})]

    async def test_user_workspaces_with_query_searches(self):
        transport = RecordingTransport()

        await workspaces.get_user_workspaces.handler({"query": "  platform ", "first": 5}, transport)

        assert transport.calls == [(queries.SEARCH_USER_WORKSPACES, {"query": "platform", "first": 5})]

    async def test_create_workspace(self):
        transport = RecordingTransport()

        await workspaces.create_workspace.handler(
            {"name": "W", "organization_id": "O1", "repository_ids": [1, 2]}, transport
        )

        assert transport.variables == [{
            "input": {
                "name": "W",
                "description": "",
                "zenhubOrganizationId": "O1",
                "repositoryGhIds": [1, 2],
            },
        }]


class TestSprintTools:

    async def test_create_sprint_defaults(self):
        transport = RecordingTransport()

        await sprints.create_sprint.handler(
            {"name": "S", "start_date": "2024-01-01", "end_date": "2024-01-14", "workspace_id": "W1"}, transport
        )

        config = transport.variables[0]["input"]["sprintConfig"]
        assert config["tzIdentifier"] == "UTC"
        assert config["settings"] == {"moveUnfinishedIssues": False}

    def test_sprint_settings_with_pipeline(self):
        assert sprints.sprint_settings({"pipeline_id": "P1", "move_unfinished_issues": True}) == {
            "moveUnfinishedIssues": True,
            "issuesFromPipeline": {"pipelineId": "P1", "enabled": True, "totalStoryPoints": 0},
        }

    async def test_update_sprint_renames_dates(self):
        transport = RecordingTransport()

        await sprints.update_sprint.handler({"sprint_id": "S1", "end_date": "2024-02-01"}, transport)

        assert transport.variables == [{"input": {"sprintId": "S1", "endAt": "2024-02-01"}}]


class TestMilestoneTools:

    async def test_create_milestone_renames_dates(self):
        transport = RecordingTransport()

        await milestones.create_milestone.handler(
            {"title": "M", "repository_id": "R1", "due_date": "2024-03-01"}, transport
        )

        assert transport.variables == [{"input": {"title": "M", "repositoryId": "R1", "dueOn": "2024-03-01"}}]


class TestDependencyTools:

    async def test_create_dependency_returns_the_dependency(self):
        transport = RecordingTransport({"createIssueDependency": {"issueDependency": {"id": "D1"}}})

        response = await dependencies.create_issue_dependency.handler(
            {
                "blocking_repository_gh_id": 1,
                "blocking_issue_number": 10,
                "blocked_repository_gh_id": 2,
                "blocked_issue_number": 20,
            },
            transport,
        )

        assert transport.variables == [{
            "input": {
                "blockingIssue": {"repositoryGhId": 1, "issueNumber": 10},
                "blockedIssue": {"repositoryGhId": 2, "issueNumber": 20},
            },
        }]
        assert response.payload() == {"id": "D1"}


class TestLabelTools:

    async def test_create_zenhub_label(self):
        transport = RecordingTransport()

        await labels.create_zenhub_label.handler(
            {"workspace_id": "W1", "name": "infra", "color": "ff0000", "description": "Infra work"}, transport
        )

        assert transport.variables == [{
            "input": {"workspaceId": "W1", "name": "infra", "color": "ff0000", "description": "Infra work"},
        }]


class TestUserTools:

    async def test_repository_collaborators_makes_no_call(self):
        transport = RecordingTransport()

        response = await users.get_repository_collaborators.handler({"repository_id": "R1"}, transport)

        assert transport.calls == []
        assert not response.is_error
        assert "zenhub_get_workspace_users" in response.payload()["error"]

    async def test_owner_by_gh_id(self):
        transport = RecordingTransport()

        await users.get_owner_by_gh_id.handler({"github_id": 99}, transport)

        assert transport.variables == [{"ghId": 99}]


class TestQueryTools:

    async def test_raw_query_passes_document_and_variables(self):
        transport = RecordingTransport({"viewer": {"id": "U1"}})

        response = await query_tools.query_potentially_dangerous.handler(
            {"query": "query { viewer { id } }", "variables": {"a": 1}}, transport
        )

        assert transport.calls == [("query { viewer { id } }", {"a": 1})]
        assert response.payload() == {"viewer": {"id": "U1"}}

    async def test_raw_query_requires_a_document(self):
        with pytest.raises(ToolInputError):
            await query_tools.query_potentially_dangerous.handler({}, RecordingTransport())

    async def test_search_issues_in_repository_maps_query_to_user(self):
        transport = RecordingTransport()

        await query_tools.search_issues_in_repository.handler(
            {"workspace_id": "W1", "query": "octocat"}, transport
        )

        assert transport.variables == [
            {"workspaceId": "W1", "user": "octocat", "repoIds": [], "pipelineIds": []},
        ]

    async def test_workspace_issues_pagination_cursor(self):
        transport = RecordingTransport()

        await query_tools.get_workspace_issues.handler({"workspace_id": "W1", "after": "c1"}, transport)
        await query_tools.get_workspace_issues.handler({"workspace_id": "W1"}, transport)

        assert transport.variables == [{"workspaceId": "W1", "after": "c1"}, {"workspaceId": "W1"}]
