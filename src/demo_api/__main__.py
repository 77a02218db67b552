"""Entry point for the demo riddle API."""
import click
import uvicorn


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to bind the server to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def main(host: str, port: int, reload: bool):
    """Start the demo riddle API server."""
    click.echo(f"Starting demo riddle API on http://{host}:{port}")
    click.echo("Available endpoints:")
    click.echo("  - POST /riddlebot/start          - Log in, get the first riddle path")
    click.echo("  - GET  /riddlebot/riddles/{n}    - Fetch riddle n")
    click.echo("  - POST /riddlebot/riddles/{n}    - Answer riddle n")
    click.echo(f"\nSolve it with: riddlebot --base-url http://{host}:{port}/ <login>")

    if reload:
        # Use import string for reload mode
        uvicorn.run("demo_api.api:app", host=host, port=port, reload=True)
    else:
        from demo_api.api import app
        uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
