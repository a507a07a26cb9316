"""Skills Enhance CLI tool (skillsctl)."""

from typing import Optional

import httpx
import typer

from skills_enhance.core.config import settings

app = typer.Typer(name="skillsctl", help="Skills Enhance access service CLI")
roles_app = typer.Typer(help="Role registry commands")
users_app = typer.Typer(help="User directory commands")
navbar_app = typer.Typer(help="Navbar configuration commands")
app.add_typer(roles_app, name="roles")
app.add_typer(users_app, name="users")
app.add_typer(navbar_app, name="navbar")

ApiOption = typer.Option(None, "--api", help="API base URL (defaults to API_URL)")


def _request(method: str, path: str, api: Optional[str] = None, **kwargs) -> dict:
    resp = httpx.request(method, f"{api or settings.API_URL}{path}", timeout=10, **kwargs)
    if resp.status_code >= 400:
        typer.echo(f"Error {resp.status_code}: {resp.text}", err=True)
        raise typer.Exit(code=1)
    return resp.json()


@app.command("login")
def login(
    email: str = typer.Argument(..., help="Email of the user to act as"),
    api: Optional[str] = ApiOption,
):
    """Switch the server's current actor."""
    user = _request("POST", "/auth/login", api, json={"email": email, "password": ""})
    typer.echo(f"Logged in as {user['name']} ({user['active_role']})")


@app.command("whoami")
def whoami(api: Optional[str] = ApiOption):
    """Show the current actor and their capabilities."""
    user = _request("GET", "/auth/me", api)
    caps = _request("GET", "/auth/me/capabilities", api)
    typer.echo(f"{user['name']} <{user['email']}> active={user['active_role']} roles={','.join(user['roles'])}")
    granted = [k for k, v in (caps.get("permissions") or {}).items() if v]
    typer.echo(f"  permissions: {', '.join(granted) or '-'}")


@roles_app.command("list")
def list_roles(api: Optional[str] = ApiOption):
    """List all roles."""
    for role in _request("GET", "/roles/", api):
        marker = "*" if role["is_predefined"] else " "
        parent = f" (under {role['parent_role_id']})" if role.get("parent_role_id") else ""
        typer.echo(f" {marker} [{role['id']}] {role['name']}{parent}")


@users_app.command("list")
def list_users(api: Optional[str] = ApiOption):
    """List all users (needs manageUsers)."""
    for user in _request("GET", "/admin/users", api):
        status = "" if user["is_active"] else " [inactive]"
        typer.echo(f"  [{user['id']}] {user['name']} <{user['email']}> {user['active_role']}{status}")


@users_app.command("switch-role")
def switch_role(
    user_id: str = typer.Argument(..., help="User ID"),
    role_id: str = typer.Argument(..., help="Role the user already holds"),
    api: Optional[str] = ApiOption,
):
    """Change a user's active role."""
    user = _request("PUT", f"/admin/users/{user_id}/active-role", api, json={"role_id": role_id})
    typer.echo(f"{user['name']} is now active as {user['active_role']}")


@navbar_app.command("show")
def show_navbar(api: Optional[str] = ApiOption):
    """Print the navbar configuration."""
    config = _request("GET", "/navbar-config", api)
    typer.echo(f"position={config['position']} visible={config['visible']} logo={config['logoText']}")
    for page, enabled in config["pagesEnabled"].items():
        typer.echo(f"  {'on ' if enabled else 'off'} {page}")


@navbar_app.command("set-position")
def set_navbar_position(
    position: str = typer.Argument(..., help="top or side"),
    api: Optional[str] = ApiOption,
):
    """Move the navbar."""
    result = _request("PUT", "/navbar-config", api, json={"position": position})
    typer.echo(f"Navbar position: {result['config']['position']}")


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload"),
):
    """Start the FastAPI server."""
    import uvicorn
    uvicorn.run("skills_enhance.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
