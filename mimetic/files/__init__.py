"""Read-only files, file operations and directory listing."""