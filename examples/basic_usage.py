"""
Basic usage examples for the CurseForge API client.

Set CURSEFORGE_API_KEY in the environment or in a .env file before
running this script.
"""

import logging
import tempfile

from curseforge_api import (
    CurseForgeClient,
    CurseForgeError,
    DownloadFailedError,
    NotFoundError,
    RateLimitExceededError,
)
from curseforge_api.categories import get_minecraft_categories
from curseforge_api.models import ModLoaderType, SearchRequest, SortField, SortOrder
from curseforge_api.projects import (
    download_project_file,
    get_project,
    get_project_by_slug,
    get_project_files,
)
from curseforge_api.search import search_by_fingerprint, search_projects


def project_example(client):
    """Look up a project and its latest files."""
    print("=== Project Example ===\n")

    project = get_project(client, 238222)
    print(f"{project.name}: {project.summary}")
    print(f"Downloads: {project.download_count}\n")

    files = get_project_files(
        client,
        project.id,
        game_version="1.20.1",
        mod_loader_type=ModLoaderType.FORGE,
        page_size=5,
    )
    print(f"Showing {len(files)} of {files.pagination.total_count} files:")
    for file in files:
        print(f"  - {file.display_name} ({file.file_length} bytes)")
    print()


def search_example(client):
    """Search for popular Fabric mods."""
    print("=== Search Example ===\n")

    request = SearchRequest(
        game_id=432,
        search_filter="map",
        mod_loader_type=ModLoaderType.FABRIC,
        sort_field=SortField.POPULARITY,
        sort_order=SortOrder.DESC,
        page_size=10,
    )
    for project in search_projects(client, request):
        print(f"  - {project.name} ({project.slug})")
    print()

    categories = get_minecraft_categories(client)
    print(f"Minecraft has {len(categories)} categories\n")


def download_example(client):
    """Download the main file of a project."""
    print("=== Download Example ===\n")

    project = get_project_by_slug(client, "jei")
    main_file = next(
        (f for f in project.latest_files if f.id == project.main_file_id),
        None,
    )
    if main_file is None:
        print("No main file listed\n")
        return

    with tempfile.TemporaryDirectory() as directory:
        try:
            path = download_project_file(client, main_file, directory)
        except DownloadFailedError as e:
            print(f"Download failed: {e}\n")
            return
        print(f"Saved {path.name} ({path.stat().st_size} bytes)")

        result = search_by_fingerprint(client, [main_file.file_fingerprint])
        print(f"Fingerprint matches: {len(result.exact_matches)}\n")


def error_handling_example(client):
    """Demonstrate error handling."""
    print("=== Error Handling Example ===\n")

    try:
        get_project_by_slug(client, "this-project-does-not-exist")
    except NotFoundError as e:
        print(f"Caught NotFoundError: {e}\n")

    try:
        get_project(client, 238222)
    except RateLimitExceededError:
        print("Still rate limited after all retries\n")
    except CurseForgeError as e:
        print(f"Request failed: {e}\n")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO)

    print("CurseForge API Client - Usage Examples")
    print("=" * 50)
    print()

    with CurseForgeClient.from_env(max_retries=3, retry_delay=2.0) as client:
        project_example(client)
        search_example(client)
        download_example(client)
        error_handling_example(client)

    print("=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    main()
