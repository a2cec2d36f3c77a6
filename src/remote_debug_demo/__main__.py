from remote_debug_demo.demo import main

if __name__ == "__main__":
    raise SystemExit(main())
