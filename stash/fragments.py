"""GraphQL documents for the Stash queries this client issues.

Each query selects the fields of the matching result type in
``stash.types``; ``tests/stash/unit/test_fragments.py`` keeps the two
in step.
"""

# Tag fragments
TAG_FIELDS = """
    id
    name
    aliases
    description
    image_path
    favorite
    scene_count
    scene_marker_count
    performer_count
"""

FIND_TAGS_QUERY = f"""
query FindTags {{
    findTags(filter: {{per_page: -1}}) {{
        count
        tags {{
            {TAG_FIELDS}
        }}
    }}
}}
"""

# Performer fragments
PERFORMER_FIELDS = """
    id
    name
    disambiguation
    alias_list
    gender
    country
    image_path
    favorite
    rating100
    scene_count
    tags {
        id
        name
    }
"""

FIND_PERFORMERS_QUERY = f"""
query FindPerformers {{
    findPerformers(filter: {{per_page: -1}}) {{
        count
        performers {{
            {PERFORMER_FIELDS}
        }}
    }}
}}
"""

# Marker fragments
MARKER_FIELDS = """
    id
    title
    seconds
    end_seconds
    stream
    preview
    screenshot
    primary_tag {
        id
        name
    }
    tags {
        id
        name
    }
    scene {
        id
        title
        interactive
        files {
            id
            path
            basename
            duration
            width
            height
        }
        paths {
            screenshot
            preview
            stream
            funscript
        }
        performers {
            id
            name
        }
    }
"""

FIND_MARKERS_QUERY = f"""
query FindSceneMarkers($filter: FindFilterType, $scene_marker_filter: SceneMarkerFilterType) {{
    findSceneMarkers(filter: $filter, scene_marker_filter: $scene_marker_filter) {{
        count
        scene_markers {{
            {MARKER_FIELDS}
        }}
    }}
}}
"""
