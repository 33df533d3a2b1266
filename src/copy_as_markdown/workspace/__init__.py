from copy_as_markdown.workspace.resolvers import FixedWorkspace, GitWorkspace, get_git_repo_root

__all__ = [
    "FixedWorkspace",
    "GitWorkspace",
    "get_git_repo_root",
]
