"""
GraphQL documents for the ZenHub public API.

One constant per operation, named after the operation. Tool modules pass
these to the transport together with the remapped variables.
"""

# =============================================================================
# Issues
# =============================================================================

CREATE_ISSUE = """
mutation createIssue($input: CreateIssueInput!) {
  createIssue(input: $input) {
    issue {
      id
      title
      number
      htmlUrl
      state
    }
  }
}
"""

UPDATE_ISSUE = """
mutation updateIssue($input: UpdateIssueInput!) {
  updateIssue(input: $input) {
    issue {
      id
      title
      body
    }
  }
}
"""

CLOSE_ISSUES = """
mutation closeIssues($input: CloseIssuesInput!) {
  closeIssues(input: $input) {
    successCount
  }
}
"""

REOPEN_ISSUES = """
mutation reopenIssues($input: ReopenIssuesInput!) {
  reopenIssues(input: $input) {
    successCount
  }
}
"""

MOVE_ISSUE = """
mutation moveIssue($input: MoveIssueInput!) {
  moveIssue(input: $input) {
    issue {
      id
    }
  }
}
"""

ADD_ASSIGNEES_TO_ISSUES = """
mutation addAssigneesToIssues($input: AddAssigneesToIssuesInput!) {
  addAssigneesToIssues(input: $input) {
    successCount
  }
}
"""

REMOVE_ASSIGNEES_FROM_ISSUES = """
mutation removeAssigneesFromIssues($input: RemoveAssigneesFromIssuesInput!) {
  removeAssigneesFromIssues(input: $input) {
    successCount
  }
}
"""

ADD_LABELS_TO_ISSUES = """
mutation addLabelsToIssues($input: AddLabelsToIssuesInput!) {
  addLabelsToIssues(input: $input) {
    successCount
  }
}
"""

REMOVE_LABELS_FROM_ISSUES = """
mutation removeLabelsFromIssues($input: RemoveLabelsFromIssuesInput!) {
  removeLabelsFromIssues(input: $input) {
    successCount
  }
}
"""

SET_ESTIMATE = """
mutation setEstimate($input: SetEstimateInput!) {
  setEstimate(input: $input) {
    clientMutationId
  }
}
"""

ADD_ISSUES_TO_EPICS = """
mutation addIssuesToEpics($input: AddIssuesToEpicsInput!) {
  addIssuesToEpics(input: $input) {
    epics {
      id
    }
  }
}
"""

REMOVE_ISSUES_FROM_EPICS = """
mutation removeIssuesFromEpics($input: RemoveIssuesFromEpicsInput!) {
  removeIssuesFromEpics(input: $input) {
    epics {
      id
    }
  }
}
"""

# =============================================================================
# Epics
# =============================================================================

CREATE_EPIC = """
mutation createEpic($input: CreateEpicInput!) {
  createEpic(input: $input) {
    epic {
      id
      issue {
        id
        title
        number
        htmlUrl
      }
    }
  }
}
"""

CREATE_EPIC_FROM_ISSUE = """
mutation createEpicFromIssue($input: CreateEpicFromIssueInput!) {
  createEpicFromIssue(input: $input) {
    epic {
      id
      issue {
        id
        title
        number
        htmlUrl
      }
    }
  }
}
"""

CREATE_ZENHUB_EPIC = """
mutation createZenhubEpic($input: CreateZenhubEpicInput!) {
  createZenhubEpic(input: $input) {
    zenhubEpic {
      id
      title
    }
  }
}
"""

UPDATE_ZENHUB_EPIC = """
mutation updateZenhubEpic($input: UpdateZenhubEpicInput!) {
  updateZenhubEpic(input: $input) {
    zenhubEpic {
      id
      title
    }
  }
}
"""

UPDATE_ZENHUB_EPIC_DATES = """
mutation updateZenhubEpicDates($input: UpdateZenhubEpicDatesInput!) {
  updateZenhubEpicDates(input: $input) {
    zenhubEpic {
      id
      startOn
      endOn
    }
  }
}
"""

DELETE_ZENHUB_EPIC = """
mutation deleteZenhubEpic($input: DeleteZenhubEpicInput!) {
  deleteZenhubEpic(input: $input) {
    zenhubEpicId
  }
}
"""

# =============================================================================
# Workspaces
# =============================================================================

CREATE_WORKSPACE = """
mutation createWorkspace($input: CreateWorkspaceInput!) {
  createWorkspace(input: $input) {
    workspace {
      id
      name
      description
    }
  }
}
"""

GET_USER_WORKSPACES_FROM_ORGS = """
query getUserWorkspacesFromOrgs($first: Int) {
  viewer {
    zenhubOrganizations(first: 10) {
      nodes {
        id
        name
        workspaces(first: $first) {
          nodes {
            id
            name
            description
            pipelinesConnection {
              totalCount
            }
            repositoriesConnection {
              totalCount
            }
          }
          pageInfo {
            hasNextPage
            endCursor
          }
        }
      }
    }
  }
}
"""

SEARCH_USER_WORKSPACES = """
query searchUserWorkspaces($query: String!, $first: Int) {
  viewer {
    searchWorkspaces(query: $query, first: $first) {
      nodes {
        id
        name
        description
        pipelinesConnection {
          totalCount
        }
        repositoriesConnection {
          totalCount
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

GET_USER_ORGANIZATIONS = """
query getUserOrganizations($query: String, $first: Int) {
  viewer {
    zenhubOrganizations(query: $query, first: $first) {
      nodes {
        id
        name
        workspaces {
          totalCount
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

GET_WORKSPACE_OVERVIEW = """
query getWorkspaceOverview($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    description
    pipelinesConnection {
      totalCount
      nodes {
        id
        name
        description
        issues {
          totalCount
        }
      }
    }
    repositoriesConnection {
      totalCount
      nodes {
        id
        name
        ownerName
        issues {
          totalCount
        }
      }
    }
    zenhubEpics(first: 20) {
      totalCount
      nodes {
        id
        title
        childIssues(workspaceId: $workspaceId) {
          totalCount
        }
        startOn
        endOn
      }
    }
    zenhubUsers {
      totalCount
      nodes {
        githubUser {
          login
          avatarUrl
          name
        }
        name
        email
      }
    }
  }
}
"""

GET_ORGANIZATION_WORKSPACES = """
query getOrganizationWorkspaces($query: String, $first: Int) {
  viewer {
    zenhubOrganizations(query: $query, first: $first) {
      nodes {
        id
        name
        workspaces(first: $first) {
          nodes {
            id
            name
            description
            pipelinesConnection {
              totalCount
            }
            repositoriesConnection {
              totalCount
            }
          }
          pageInfo {
            hasNextPage
            endCursor
          }
        }
      }
    }
  }
}
"""

# =============================================================================
# Repositories
# =============================================================================

GET_WORKSPACE_REPOSITORIES = """
query getWorkspaceRepositories($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    description
    repositoriesConnection {
      nodes {
        id
        ghId
        createdAt
        name
        description
      }
    }
  }
}
"""

GET_REPOSITORIES_BY_GH_IDS = """
query getRepositoriesByGhIds($ghIds: [Int!]!) {
  repositoriesByGhId(ghIds: $ghIds) {
    id
    ghId
    name
    description
    ownerName
    createdAt
    updatedAt
    workspacesConnection {
      nodes {
        id
        name
      }
    }
  }
}
"""

ADD_REPOSITORY_TO_WORKSPACE = """
mutation addRepositoryToWorkspace($input: AddRepositoryToWorkspaceInput!) {
  addRepositoryToWorkspace(input: $input) {
    workspaceRepository {
      id
      repository {
        id
        ghId
        name
        description
      }
      workspace {
        id
        name
      }
    }
  }
}
"""

DISCONNECT_WORKSPACE_REPOSITORY = """
mutation disconnectWorkspaceRepository($input: DisconnectWorkspaceRepositoryInput!) {
  disconnectWorkspaceRepository(input: $input) {
    workspace {
      id
      name
    }
  }
}
"""

GET_REPOSITORY_DETAILS = """
query getRepositoryDetails($repositoryId: ID!) {
  node(id: $repositoryId) {
    ... on Repository {
      id
      ghId
      name
      description
      ownerName
      createdAt
      updatedAt
      workspacesConnection {
        nodes {
          id
          name
          description
        }
      }
      issues(first: 5) {
        totalCount
        nodes {
          id
          number
          title
          state
        }
      }
      milestones(first: 5) {
        totalCount
        nodes {
          id
          title
          state
        }
      }
      labels(first: 10) {
        totalCount
        nodes {
          id
          name
          color
        }
      }
    }
  }
}
"""

GET_REPOSITORY_ASSIGNABLE_USERS = """
query getRepositoryAssignableUsers($repositoryId: ID!, $first: Int) {
  node(id: $repositoryId) {
    ... on Repository {
      id
      name
      assignableUsers(first: $first) {
        totalCount
        nodes {
          id
          login
          name
          zenhubUser {
            imageUrl
            githubUser {
              login
              avatarUrl
            }
          }
        }
        pageInfo {
          hasNextPage
          endCursor
        }
      }
    }
  }
}
"""

# =============================================================================
# Sprints
# =============================================================================

CREATE_SPRINT_CONFIG = """
mutation createSprintConfig($input: CreateSprintConfigInput!) {
  createSprintConfig(input: $input) {
    sprintConfig {
      id
      name
    }
  }
}
"""

UPDATE_SPRINT = """
mutation updateSprint($input: UpdateSprintInput!) {
  updateSprint(input: $input) {
    sprint {
      id
      name
      startAt
      endAt
      state
    }
  }
}
"""

ADD_ISSUES_TO_SPRINTS = """
mutation addIssuesToSprints($input: AddIssuesToSprintsInput!) {
  addIssuesToSprints(input: $input) {
    sprintIssues {
      id
    }
  }
}
"""

REMOVE_ISSUES_FROM_SPRINTS = """
mutation removeIssuesFromSprints($input: RemoveIssuesFromSprintsInput!) {
  removeIssuesFromSprints(input: $input) {
    sprints {
      id
    }
  }
}
"""

DELETE_SPRINT_CONFIG_AND_OPEN_SPRINTS = """
mutation deleteSprintConfigAndOpenSprints($input: DeleteSprintConfigAndOpenSprintsInput!) {
  deleteSprintConfigAndOpenSprints(input: $input) {
    workspace {
      id
    }
  }
}
"""

GET_WORKSPACE_SPRINTS = """
query getWorkspaceSprints($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    sprints {
      nodes {
        id
        name
        startAt
        endAt
        state
        issues {
          totalCount
        }
      }
    }
  }
}
"""

# =============================================================================
# Pipelines
# =============================================================================

CREATE_PIPELINE = """
mutation createPipeline($input: CreatePipelineInput!) {
  createPipeline(input: $input) {
    pipeline {
      id
      name
      description
    }
  }
}
"""

UPDATE_PIPELINE = """
mutation updatePipeline($input: UpdatePipelineInput!) {
  updatePipeline(input: $input) {
    pipeline {
      id
      name
      description
    }
  }
}
"""

DELETE_PIPELINE = """
mutation deletePipeline($input: DeletePipelineInput!) {
  deletePipeline(input: $input) {
    clientMutationId
  }
}
"""

GET_WORKSPACE_PIPELINES = """
query getWorkspacePipelines($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    pipelinesConnection {
      nodes {
        id
        name
        description
        issues {
          totalCount
        }
      }
    }
  }
}
"""

# =============================================================================
# Milestones
# =============================================================================

CREATE_MILESTONE = """
mutation createMilestone($input: CreateMilestoneInput!) {
  createMilestone(input: $input) {
    milestone {
      id
      title
      description
      dueOn
    }
  }
}
"""

UPDATE_MILESTONE = """
mutation updateMilestone($input: UpdateMilestoneInput!) {
  updateMilestone(input: $input) {
    milestone {
      id
      title
      description
      dueOn
    }
  }
}
"""

ADD_MILESTONE_TO_ISSUES = """
mutation addMilestoneToIssues($input: AddMilestoneForIssuesInput!) {
  addMilestoneToIssues(input: $input) {
    successCount
  }
}
"""

REMOVE_MILESTONE_FROM_ISSUES = """
mutation removeMilestoneToIssues($input: RemoveMilestoneForIssuesInput!) {
  removeMilestoneToIssues(input: $input) {
    successCount
  }
}
"""

DELETE_MILESTONE = """
mutation deleteMilestone($input: DeleteMilestoneInput!) {
  deleteMilestone(input: $input) {
    milestone {
      id
    }
  }
}
"""

# =============================================================================
# Dependencies
# =============================================================================

CREATE_ISSUE_DEPENDENCY = """
mutation createIssueDependency($input: CreateIssueDependencyInput!) {
  createIssueDependency(input: $input) {
    issueDependency {
      id
      blockingIssue {
        id
        title
      }
      blockedIssue {
        id
        title
      }
    }
  }
}
"""

DELETE_ISSUE_DEPENDENCY = """
mutation deleteIssueDependency($input: DeleteIssueDependencyInput!) {
  deleteIssueDependency(input: $input) {
    issueDependency {
      id
    }
  }
}
"""

# =============================================================================
# Labels
# =============================================================================

CREATE_GITHUB_LABEL = """
mutation createGithubLabel($input: CreateGithubLabelInput!) {
  createGithubLabel(input: $input) {
    label {
      id
      name
      color
      description
    }
  }
}
"""

CREATE_ZENHUB_LABEL = """
mutation createZenhubLabel($input: CreateZenhubLabelInput!) {
  createZenhubLabel(input: $input) {
    zenhubLabel {
      id
      name
      color
      description
    }
  }
}
"""

DELETE_ZENHUB_LABELS = """
mutation deleteZenhubLabels($input: DeleteZenhubLabelsInput!) {
  deleteZenhubLabels(input: $input) {
    zenhubLabels {
      id
    }
  }
}
"""

GET_REPOSITORY_LABELS = """
query getRepositoryLabels($repositoryId: ID!) {
  node(id: $repositoryId) {
    ... on Repository {
      id
      name
      labels {
        nodes {
          id
          name
          color
          description
        }
      }
    }
  }
}
"""

GET_WORKSPACE_LABELS = """
query getWorkspaceLabels($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    zenhubLabels {
      nodes {
        id
        name
        color
        description
      }
    }
  }
}
"""

# =============================================================================
# Users
# =============================================================================

GET_WORKSPACE_USERS = """
query getWorkspaceUsers($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    description
    assignees {
      totalCount
      nodes {
        id
        ghId
        login
        name
        zenhubUser {
          email
        }
      }
    }
  }
}
"""

OWNER_BY_LOGIN = """
query ownerByLogin($login: String!) {
  ownerByLogin(login: $login) {
    id
    login
    avatarUrl
    ... on User {
      name
    }
    ... on Organization {
      login
    }
  }
}
"""

OWNER_BY_GH_ID = """
query ownerByGhId($ghId: Int!) {
  ownerByGhId(ghId: $ghId) {
    id
    login
    avatarUrl
    ... on User {
      name
    }
    ... on Organization {
      login
    }
  }
}
"""

# =============================================================================
# Search and lookups
# =============================================================================

SEARCH_ISSUES_BY_PIPELINE = """
query searchIssuesByPipeline($pipelineId: ID!, $query: String, $filters: IssueSearchFiltersInput!) {
  searchIssuesByPipeline(pipelineId: $pipelineId, query: $query, filters: $filters) {
    nodes {
      id
      title
      number
    }
  }
}
"""

SEARCH_ISSUES = """
query searchIssues($workspaceId: ID!, $user: String!, $repoIds: [ID!]!, $pipelineIds: [ID!]!) {
  searchIssues(
    workspaceId: $workspaceId
    query: $user
    filters: {pipelineIds: $pipelineIds, repositoryIds: $repoIds}
  ) {
    nodes {
      id
      title
      state
      body
      labels {
        nodes {
          id
          name
        }
      }
      closedAt
      creator {
        id
        githubUser {
          login
        }
        name
      }
      estimate {
        value
      }
      htmlUrl
      assignees {
        nodes {
          id
          login
        }
      }
    }
  }
}
"""

WORKSPACE_ISSUES = """
query workspaceIssues($workspaceId: ID!, $after: String) {
  workspace(id: $workspaceId) {
    issues(after: $after) {
      nodes {
        id
        pullRequest
        type
        title
        number
        state
        assignees {
          nodes {
            name
            id
            ghId
            login
          }
        }
        parentZenhubEpics {
          totalCount
        }
        repository {
          name
          ownerName
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

VIEWER = """
query viewer {
  viewer {
    id
    name
    email
    imageUrl
    githubUser {
      login
      avatarUrl
    }
  }
}
"""

ISSUE_BY_INFO = """
query issueByInfo($repositoryGhId: Int!, $issueNumber: Int!) {
  issueByInfo(repositoryGhId: $repositoryGhId, issueNumber: $issueNumber) {
    id
    title
    number
    state
    htmlUrl
    labels {
      nodes {
        name
      }
    }
    assignees {
      nodes {
        login
      }
    }
    milestone {
      title
    }
  }
}
"""
