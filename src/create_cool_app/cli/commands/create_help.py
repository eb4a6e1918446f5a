"""Shared help text for the create command."""

CREATE_COMMAND_DOC = """
Create a new project from one of the bundled templates.

Interactive Mode (default):
- Asks for the project name, template and package manager
- Asks whether to install dependencies
- Asks whether to init git, add a remote origin and push

Non-Interactive Mode (with --yes):
- Skips all prompts
- Uses the flags you pass and the defaults from ~/.create-cool-app/config.toml
- Never installs or touches git unless asked with --install / --git

What Gets Created:
- TARGET_DIR/<name>/ with the template files
- .gitignore (shipped as _gitignore inside the template)
- package.json and README.md with ${projectname}, ${yourname},
  ${pkgManager}, ${pkgManagerVersion} and ${pkgManagerX} filled in

Examples:
  create-cool-app create                                # Interactive, in the current directory
  create-cool-app create ~/code --name demo -t library -y
  create-cool-app create --name demo --pm npm --install -y
  create-cool-app create --name demo --git --remote git@github.com:me/demo.git --push -y
  create-cool-app create --name demo --dry               # Print what would happen

The target directory must not already contain files (a .git directory is fine).
"""
