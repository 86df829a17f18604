"""
PyInstaller build of DirTreePy into a single executable
"""
import os
import shutil
import subprocess
import sys

def build():
    print("Cleaning old builds...")
    for folder in ['build', 'dist']:
        if os.path.exists(folder):
            shutil.rmtree(folder)

    print("Building executable...")

    cmd = [
        'pyinstaller',
        '--onefile',
        '--windowed',
        '--name', 'DirTreePy',
        '--add-data', f'dirtree{os.pathsep}dirtree',
        '--hidden-import', 'PySide6',
        os.path.join('dirtree', '__main__.py'),
    ]

    result = subprocess.run(cmd, capture_output=True, text=True)

    if result.returncode == 0:
        exe_name = 'DirTreePy.exe' if sys.platform.startswith('win') else 'DirTreePy'
        exe_src = os.path.join('dist', exe_name)
        print("Build finished!")
        print(f"Executable: {exe_src}")

        release_dir = 'release'
        os.makedirs(release_dir, exist_ok=True)
        shutil.copy(exe_src, os.path.join(release_dir, exe_name))

        if os.path.exists('README.md'):
            shutil.copy('README.md', os.path.join(release_dir, 'README.md'))

        print(f"Release assembled in: {release_dir}/")
    else:
        print("Build failed:")
        print(result.stderr)
        sys.exit(1)

if __name__ == '__main__':
    build()
