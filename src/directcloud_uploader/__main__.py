from directcloud_uploader.cli import main

main()
