from publish_release.cli import app

app(prog_name="publish-release")
