"""Generated project files whose content depends on the scaffold outcome.

Builds the ``src/build.sh`` / ``src/build.bat`` helper, the root
``package.json`` script table and ``README.md``. Every builder is a pure
function of the answers, the host platform and the discovered Qt6 root;
writing to disk is the orchestrator's job.
"""

from __future__ import annotations

from typing import Any

from taqyon.scaffold.answers import FRAMEWORK_LABELS, ScaffoldAnswers

PROJECT_VERSION = "1.0.0"

DEV_DEPENDENCIES: dict[str, str] = {
    "concurrently": "^8.0.0",
    "cross-env": "^7.0.0",
    "wait-on": "^7.0.0",
}

QT_DOWNLOAD_URL = "https://www.qt.io/download-qt-installer"

_NOT_BUILT = "Application executable not found. Make sure to build successfully first."

_SETUP_QT = (
    "node -e \"const fs = require('fs'); const path = process.argv[1]; if(path) { "
    "const config = JSON.parse(fs.readFileSync('.taqyonrc', 'utf8') || '{}'); "
    "config.qt6Path = path; fs.writeFileSync('.taqyonrc', JSON.stringify(config, null, 2)); "
    "console.log('Qt6 path updated to ' + path); } else { console.error('Please provide a Qt6 path'); }\""
)

_TEST_QT = (
    "node -e \"const fs = require('fs'); try { "
    "const config = JSON.parse(fs.readFileSync('.taqyonrc', 'utf8') || '{}'); "
    "if(config.qt6Path && fs.existsSync(config.qt6Path)) { "
    "console.log('Qt6 found at: ' + config.qt6Path); process.exit(0); } else { "
    "console.error('Qt6 not found at configured path: ' + (config.qt6Path || 'Not configured')); "
    "process.exit(1); }} catch(e) { console.error('Error checking Qt6 installation:', e.message); "
    "process.exit(1); }\""
)

_VERIFY_QT = (
    "cd src && mkdir -p build && cd build && cmake -L .. "
    "| grep -q 'WebEngineWidgets_FOUND:BOOL=TRUE' "
    "&& echo 'Qt WebEngine is properly configured!' "
    "|| echo 'ERROR: Qt WebEngine is not properly configured. "
    "Make sure Qt is installed with WebEngine support.'"
)


def build_script_name(windows: bool) -> str:
    return "build.bat" if windows else "build.sh"


def build_script(qt6_path: str | None, windows: bool) -> str:
    """Return the build helper body.

    With a Qt6 root the script is a single configure-and-build ``cmake``
    call. Without one it asks for the path when run and substitutes it
    into the same call.
    """
    if qt6_path:
        command = f'cmake -B build -DCMAKE_PREFIX_PATH="{qt6_path}" && cmake --build build\n'
        return ("@echo off\n" if windows else "#!/bin/bash\n") + command
    if windows:
        return (
            "@echo off\n"
            "echo Qt6 was not detected during project creation.\n"
            "echo Please specify the path to your Qt6 installation:\n"
            "set /p QT_PATH=Qt6 path: \n"
            "if not defined QT_PATH (\n"
            "  echo No Qt6 path provided.\n"
            '  echo You can manually run: cmake -B build -DCMAKE_PREFIX_PATH="path/to/qt6" '
            "^&^& cmake --build build\n"
            "  exit /b 1\n"
            ")\n"
            "echo Using Qt6 path: %QT_PATH%\n"
            'cmake -B build -DCMAKE_PREFIX_PATH="%QT_PATH%" && cmake --build build\n'
        )
    return (
        "#!/bin/bash\n"
        'echo "Qt6 was not detected during project creation."\n'
        'echo "Please specify the path to your Qt6 installation:"\n'
        'read -p "Qt6 path: " QT_PATH\n'
        'if [ -z "$QT_PATH" ]; then\n'
        '  echo "No Qt6 path provided."\n'
        '  echo "You can manually run: cmake -B build -DCMAKE_PREFIX_PATH=\\"path/to/qt6\\" '
        '&& cmake --build build"\n'
        "  exit 1\n"
        "fi\n"
        'echo "Using Qt6 path: $QT_PATH"\n'
        'cmake -B build -DCMAKE_PREFIX_PATH="$QT_PATH" && cmake --build build\n'
    )


def _run_script(name: str, args: str, windows: bool) -> str:
    suffix = f" {args}" if args else ""
    if windows:
        return (
            f"if exist src\\build\\bin\\{name}.exe "
            f"(cd src\\build\\bin && {name}.exe{suffix}) else (echo {_NOT_BUILT})"
        )
    return (
        f"if [ -f src/build/bin/{name} ]; then cd src/build/bin && ./{name}{suffix}; "
        f"else echo '{_NOT_BUILT}'; fi"
    )


def package_manifest(answers: ScaffoldAnswers, windows: bool) -> dict[str, Any]:
    """Return the root ``package.json`` object.

    Args:
        answers: The scaffold choices.
        windows: Emit ``cmd.exe`` syntax instead of POSIX shell.
    """
    name = answers.project_name
    scripts: dict[str, str] = {}

    if answers.scaffold_frontend:
        scripts["frontend:dev"] = "npm run --if-present --prefix frontend dev"
        scripts["frontend:build"] = "npm run --if-present --prefix frontend build"

    if answers.scaffold_backend:
        scripts["app:build"] = (
            "cd src && .\\build.bat" if windows else "cd src && chmod +x ./build.sh && ./build.sh"
        )
        scripts["app:run"] = _run_script(name, "", windows)
        scripts["app:run:verbose"] = _run_script(name, "--verbose", windows)
        scripts["app:run:dev"] = _run_script(
            name, "--dev-server http://localhost:3000 --verbose", windows,
        )
        scripts["app:run:log"] = _run_script(name, "--log app.log --verbose", windows)
        scripts["app:help"] = _run_script(name, "--help", windows)

    if answers.scaffold_frontend and answers.scaffold_backend:
        if windows:
            scripts["start"] = (
                "npm run build && set ABSOLUTE_PATH=%cd%\\frontend\\dist && "
                + _run_script(name, '--verbose --frontend-path "%ABSOLUTE_PATH%"', windows)
            )
            scripts["dev"] = (
                'concurrently -k -r -s first "npm run frontend:dev" "npm run app:build && '
                "if not errorlevel 1 (wait-on tcp:localhost:3000 && npm run app:run:dev) "
                "else (echo Error: Failed to build Qt application. Check that Qt6 is properly "
                'installed with WebEngine and Positioning modules.)"'
            )
        else:
            scripts["start"] = (
                'npm run build && ABSOLUTE_PATH="$(pwd)/frontend/dist" && '
                + _run_script(name, '--verbose --frontend-path "$ABSOLUTE_PATH"', windows)
            )
            scripts["dev"] = (
                'concurrently -k -r -s first "npm run frontend:dev" "npm run app:build && '
                "if [ $? -eq 0 ]; then wait-on tcp:localhost:3000 && npm run app:run:dev; "
                "else echo 'Error: Failed to build Qt application. Check that Qt6 is properly "
                "installed with WebEngine and Positioning modules.'; fi\""
            )
        scripts["build"] = "npm run frontend:build && npm run app:build"
    elif answers.scaffold_frontend:
        scripts["start"] = "npm run --if-present --prefix frontend dev"
        scripts["build"] = "npm run --if-present --prefix frontend build"
        scripts["dev"] = "npm run --if-present --prefix frontend dev"
    elif answers.scaffold_backend:
        scripts["start"] = "npm run app:build && npm run app:run"
        scripts["build"] = "npm run app:build"

    scripts["setup:qt"] = _SETUP_QT
    scripts["test:qt"] = _TEST_QT
    scripts["verify:qt"] = _VERIFY_QT

    return {
        "name": name,
        "version": PROJECT_VERSION,
        "description": "Taqyon project with Qt/C++ backend and JS frontend",
        "scripts": scripts,
        "dependencies": {},
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


def qt_remediation_lines() -> list[str]:
    """Actionable steps shown when no Qt6 root could be established."""
    return [
        f"Install Qt6 from {QT_DOWNLOAD_URL}",
        "Run 'npm run app:build'; the build script will prompt for the Qt6 path",
        "Edit .taqyonrc and set 'qt6Path' to your Qt6 installation directory "
        "(or run 'taqyon setup-qt <path>')",
    ]


def readme(answers: ScaffoldAnswers, qt6_path: str | None) -> str:
    """Return the generated ``README.md`` text."""
    parts: list[str] = [
        f"# {answers.project_name}\n\nA desktop application created with Taqyon.\n\n",
    ]
    if answers.scaffold_frontend:
        framework = FRAMEWORK_LABELS[answers.frontend_framework]
        parts.append(
            "## Frontend\n\nThe frontend is located in the `frontend/` directory "
            f"and uses {framework} ({answers.frontend_language}).\n\n"
        )
    if answers.scaffold_backend:
        parts.append("## Backend\n\nThe backend is located in the `src/` directory and uses Qt.\n\n")
        if qt6_path:
            parts.append(f"Qt6 path: `{qt6_path}`\n\n")
        else:
            parts.append("### Qt Not Detected\n\n")
            parts.append(
                "Qt6 was not found during project creation. You have several options:\n\n"
            )
            for number, line in enumerate(qt_remediation_lines(), start=1):
                parts.append(f"{number}. {line}\n")
            parts.append("\nCommon Qt6 installation paths:\n")
            parts.append("- macOS: `~/Qt/6.x.y/macos` or `/usr/local/opt/qt6` (Homebrew)\n")
            parts.append("- Windows: `C:\\Qt\\6.x.y\\msvc2019_64`\n")
            parts.append("- Linux: `~/Qt/6.x.y/gcc_64` or `/usr/lib/qt6`\n\n")

    parts.append("## Development\n\n")
    parts.append("- `npm start`: Run the development environment\n")
    parts.append("- `npm run build`: Build the project\n")
    if answers.scaffold_frontend:
        parts.append("- `npm run frontend:dev`: Run frontend development server\n")
        parts.append("- `npm run frontend:build`: Build frontend\n")
    if answers.scaffold_backend:
        parts.append("- `npm run app:build`: Build the Qt application\n")
        parts.append("- `npm run app:run`: Run the Qt application\n")
        parts.append("- `npm run test:qt`: Check the configured Qt6 path\n")
    return "".join(parts)
